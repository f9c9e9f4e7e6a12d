from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific generative-text clients."""

    @abstractmethod
    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        segments: list[str],
    ) -> str:
        """Send the ordered text segments as one request and return the reply text.

        Raises:
            ConfigurationError: if the client has no credentials.
            AnalysisServiceError: on network, timeout, or API failures.
        """
