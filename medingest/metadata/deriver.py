from medingest.analysis.models import FindingsRecord, TestFinding
from medingest.metadata.models import CompletedMetadata, DerivedMetadata, UnanalyzedMetadata

# Checked in order; titles can mention several organs, the first match wins.
CATEGORY_RULES: tuple[tuple[str, str], ...] = (
    ("blood", "Blood Test"),
    ("kidney", "Kidney Function"),
    ("liver", "Liver Function"),
    ("thyroid", "Thyroid"),
    ("prescription", "Prescription"),
)
DEFAULT_CATEGORY = "General Medical Report"


def derive(findings: FindingsRecord | None) -> DerivedMetadata:
    """Derive category and anomaly lines; None means analysis never produced a record."""
    if findings is None:
        return UnanalyzedMetadata()
    return CompletedMetadata(
        category=categorize(findings.report_title),
        anomalies=tuple(describe_anomaly(test) for test in findings.tests),
    )


def categorize(report_title: str) -> str:
    title = report_title.lower()
    for keyword, category in CATEGORY_RULES:
        if keyword in title:
            return category
    return DEFAULT_CATEGORY


def describe_anomaly(test: TestFinding) -> str:
    return f"{test.parameter}: {test.value} {test.unit} ({test.status})"
