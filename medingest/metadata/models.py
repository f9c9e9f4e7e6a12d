from dataclasses import dataclass, field
from typing import Literal

UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class CompletedMetadata:
    """Metadata for a document whose analysis produced a findings record."""

    category: str
    anomalies: tuple[str, ...] = field(default_factory=tuple)
    processing_status: Literal["completed"] = "completed"

    @property
    def anomaly_count(self) -> int:
        return len(self.anomalies)

    @property
    def has_anomalies(self) -> bool:
        return self.anomaly_count > 0


@dataclass(frozen=True)
class UnanalyzedMetadata:
    """Metadata for a document stored without analysis."""

    category: str = UNCATEGORIZED
    processing_status: Literal["uploaded_without_analysis"] = "uploaded_without_analysis"

    @property
    def anomalies(self) -> tuple[str, ...]:
        return ()

    @property
    def anomaly_count(self) -> int:
        return 0

    @property
    def has_anomalies(self) -> bool:
        return False


DerivedMetadata = CompletedMetadata | UnanalyzedMetadata
