"""AI-powered extraction of abnormal findings from medical report text."""

from pathlib import Path

from medingest.analysis.base import BaseAnalyzer
from medingest.analysis.client_base import BaseAnalysisClient
from medingest.analysis.prompt_loader import load_prompt
from medingest.logging.logger import Log

MAX_INPUT_CHARS = 60_000
DOCUMENT_TEXT_PREFIX = "\n\nDocument Text:\n"


class Analyzer(BaseAnalyzer):
    """Builds the analysis request and sends it through an AI client."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.0,
        prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._prompt = load_prompt(prompt_path)

    async def analyze(self, text: str, prompt_override: str | None = None) -> str:
        segments = self._build_segments(text, prompt_override)
        Log.debug(f"Analysis prompt:\n{segments[0]}")

        raw_output = await self._client.generate(
            model=self._model,
            temperature=self._temperature,
            segments=segments,
        )
        Log.debug(f"AI raw response:\n{raw_output}")
        Log.info(f"Analysis complete: {len(raw_output)} chars returned")
        return raw_output

    def _build_segments(self, text: str, prompt_override: str | None) -> list[str]:
        prompt = (prompt_override or "").strip() or self._prompt
        if len(text) > MAX_INPUT_CHARS:
            Log.debug(f"Truncating document text from {len(text)} to {MAX_INPUT_CHARS} chars")
        return [prompt, DOCUMENT_TEXT_PREFIX + text[:MAX_INPUT_CHARS]]
