from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: str
    title: str
    file_name: str
    file_url: str
    file_type: str
    file_size: int
    user_id: str
    category: str
    processing_status: str
    anomalies: list[str] = field(default_factory=list)
    has_anomalies: bool = False
    anomaly_count: int = 0
    extracted_text: str | None = None
    ai_analysis: dict[str, Any] | None = None
    created_at: datetime | None = None
    uploaded_at: datetime | None = None
