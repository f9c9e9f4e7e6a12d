from pathlib import Path

from medingest.analysis.exceptions import ConfigurationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(path: Path | None = None) -> str:
    """Load the analysis instruction prompt.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled analysis_prompt.txt.

    Raises:
        ConfigurationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ConfigurationError(f"Failed to load analysis prompt: {exc}") from exc
