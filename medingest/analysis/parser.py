"""Best-effort parsing of raw model output into a FindingsRecord."""

import json
import re

from medingest.analysis.exceptions import MalformedAnalysisOutput
from medingest.analysis.models import FindingsRecord
from medingest.analysis.validator import build_findings
from medingest.logging.logger import Log

_JSON_FENCE_RE = re.compile(r"```json\n?")
_TRAILING_FENCE_RE = re.compile(r"```\n?\Z")
_ANY_FENCE_RE = re.compile(r"```\n?")


def strip_code_fences(raw: str) -> str:
    """Trim and remove markdown fences around a JSON payload.

    A leading ```json fence removes every ```json marker plus a trailing
    closing fence. A leading untagged fence removes every fence marker.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```json"):
        cleaned = _JSON_FENCE_RE.sub("", cleaned)
        cleaned = _TRAILING_FENCE_RE.sub("", cleaned)
    elif cleaned.startswith("```"):
        cleaned = _ANY_FENCE_RE.sub("", cleaned)
    return cleaned


def parse_findings(raw: str) -> FindingsRecord:
    """Parse model output; never raises.

    Output that is not valid JSON, or JSON that does not describe a findings
    object, is kept verbatim as the summary of a fallback record.
    """
    cleaned = strip_code_fences(raw)
    try:
        return build_findings(json.loads(cleaned))
    except (ValueError, RecursionError, MalformedAnalysisOutput) as exc:
        Log.warning(f"Invalid JSON from AI, storing raw text instead: {exc}")
        return FindingsRecord.fallback(raw)
