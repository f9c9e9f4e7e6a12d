from abc import ABC, abstractmethod

from medingest.analysis.models import FindingsRecord
from medingest.analysis.parser import parse_findings


class BaseAnalyzer(ABC):
    """Contract for all structured analysis adapters."""

    @abstractmethod
    async def analyze(self, text: str, prompt_override: str | None = None) -> str:
        """Submit extracted document text to the model.

        Args:
            text: Extracted document text.
            prompt_override: Instruction prompt to use instead of the bundled one.

        Returns:
            The model's raw free-text reply.

        Raises:
            ConfigurationError: if the provider has no credentials.
            AnalysisServiceError: if the provider call fails.
        """

    def parse(self, raw_output: str) -> FindingsRecord:
        """Turn raw model output into a FindingsRecord, falling back on bad output."""
        return parse_findings(raw_output)
