import httpx
import openai

from medingest.analysis.client_base import BaseAnalysisClient
from medingest.analysis.exceptions import AnalysisServiceError, ConfigurationError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the async OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        provider: str,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._provider = provider
        self._client: openai.AsyncOpenAI | None = None
        if api_key:
            self._client = openai.AsyncOpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
                max_retries=0,
            )

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        segments: list[str],
    ) -> str:
        if self._client is None:
            raise ConfigurationError(
                f"API key missing for analysis provider '{self._provider}'. "
                f"Set ANALYSIS_{self._provider.upper()}_API_KEY."
            )
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": segment} for segment in segments
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisServiceError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisServiceError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisServiceError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisServiceError("AI returned empty response")
        return content
