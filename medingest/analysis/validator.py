"""Builds a FindingsRecord from parsed model JSON.

The model is asked for an exact shape but is free to deviate. Missing or
empty text fields take their defaults, numeric values are kept as text, and
test entries with a status other than LOW/HIGH are dropped so that only
abnormal parameters reach the record. Anything structurally unusable raises
MalformedAnalysisOutput.
"""

from typing import Any

from medingest.analysis.exceptions import MalformedAnalysisOutput
from medingest.analysis.models import (
    ABNORMAL_STATUSES,
    NO_SUMMARY,
    NOT_SPECIFIED,
    FindingsRecord,
    TestFinding,
)
from medingest.logging.logger import Log


def build_findings(data: Any) -> FindingsRecord:
    """Validate parsed JSON and build a FindingsRecord.

    Raises:
        MalformedAnalysisOutput: if the data is not a findings object.
    """
    if not isinstance(data, dict):
        raise MalformedAnalysisOutput("JSON response must be an object")
    return FindingsRecord(
        report_title=_text(data.get("report_title"), "report_title"),
        doctor_name=_text(data.get("doctor_name"), "doctor_name") or NOT_SPECIFIED,
        report_date=_text(data.get("report_date"), "report_date") or NOT_SPECIFIED,
        tests=_build_tests(data.get("tests")),
        summary=_text(data.get("summary"), "summary") or NO_SUMMARY,
    )


def _build_tests(raw: Any) -> tuple[TestFinding, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise MalformedAnalysisOutput("'tests' must be a list")
    tests: list[TestFinding] = []
    for index, item in enumerate(raw):
        test = _build_test(item, index)
        if test is not None:
            tests.append(test)
    return tuple(tests)


def _build_test(raw: Any, index: int) -> TestFinding | None:
    if not isinstance(raw, dict):
        raise MalformedAnalysisOutput(f"Test at index {index} must be an object")
    status = _text(raw.get("status"), f"tests[{index}].status").upper()
    if status not in ABNORMAL_STATUSES:
        Log.debug(f"Dropping test at index {index} with status {status!r}")
        return None
    return TestFinding(
        parameter=_text(raw.get("parameter"), f"tests[{index}].parameter"),
        value=_text(raw.get("value"), f"tests[{index}].value"),
        unit=_text(raw.get("unit"), f"tests[{index}].unit"),
        reference_range=_text(raw.get("reference_range"), f"tests[{index}].reference_range"),
        status=status,  # type: ignore[arg-type]
    )


def _text(raw: Any, name: str) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw.strip()
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise MalformedAnalysisOutput(f"'{name}' must be a string, got {type(raw).__name__}")
