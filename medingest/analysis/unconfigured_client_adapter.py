from medingest.analysis.client_base import BaseAnalysisClient
from medingest.analysis.exceptions import ConfigurationError


class UnconfiguredClientAdapter(BaseAnalysisClient):
    """Stands in for a provider whose settings are incomplete.

    Every call raises ConfigurationError, so ingestion still uploads and
    saves the file without analysis.
    """

    def __init__(self, reason: str) -> None:
        self._reason = reason

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        segments: list[str],
    ) -> str:
        raise ConfigurationError(self._reason)
