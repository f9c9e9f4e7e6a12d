from dataclasses import dataclass, field
from typing import Literal

NOT_SPECIFIED = "Not specified"
NO_SUMMARY = "No summary available"

FindingStatus = Literal["LOW", "HIGH"]
ABNORMAL_STATUSES: frozenset[str] = frozenset({"LOW", "HIGH"})


@dataclass(frozen=True)
class TestFinding:
    """One abnormal test parameter as reported by the model."""

    __test__ = False

    parameter: str
    value: str
    unit: str
    reference_range: str
    status: FindingStatus

    def to_payload(self) -> dict[str, str]:
        return {
            "parameter": self.parameter,
            "value": self.value,
            "unit": self.unit,
            "reference_range": self.reference_range,
            "status": self.status,
        }


@dataclass(frozen=True)
class FindingsRecord:
    """Structured output of the analysis stage.

    `report_title` keeps whatever the model returned (possibly empty);
    callers that need a display title fall back to the document title.
    """

    report_title: str = ""
    doctor_name: str = NOT_SPECIFIED
    report_date: str = NOT_SPECIFIED
    tests: tuple[TestFinding, ...] = field(default_factory=tuple)
    summary: str = NO_SUMMARY
    is_fallback: bool = False

    @classmethod
    def fallback(cls, raw_output: str) -> "FindingsRecord":
        """Wrap unparsable model output as the summary of an empty record."""
        return cls(summary=raw_output, is_fallback=True)

    def to_payload(self, document_title: str, processed_at: str) -> dict[str, object]:
        """Serialize for the `ai_analysis` JSON column."""
        return {
            "reportTitle": self.report_title or document_title,
            "doctorName": self.doctor_name,
            "reportDate": self.report_date,
            "tests": [test.to_payload() for test in self.tests],
            "summary": self.summary,
            "processedAt": processed_at,
        }
