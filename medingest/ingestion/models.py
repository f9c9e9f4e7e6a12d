import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from medingest.analysis.models import FindingsRecord
from medingest.metadata.models import DerivedMetadata

PDF_MEDIA_TYPE = "application/pdf"
ACCEPTED_MEDIA_TYPES: frozenset[str] = frozenset(
    {PDF_MEDIA_TYPE, "image/jpeg", "image/png", "image/jpg"}
)


class IngestionState(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    ANALYZING = "analyzing"
    ANALYSIS_SKIPPED_OR_FAILED = "analysis_skipped_or_failed"
    UPLOADING = "uploading"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceFile:
    """A submitted file: name, bytes and declared media type."""

    file_name: str
    content: bytes
    media_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    @property
    def is_pdf(self) -> bool:
        return self.media_type == PDF_MEDIA_TYPE

    @classmethod
    def from_path(cls, path: Path, media_type: str | None = None) -> "SourceFile":
        """Read a file from disk, guessing the media type from its name if not given."""
        if media_type is None:
            media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return cls(file_name=path.name, content=path.read_bytes(), media_type=media_type)


def default_title(file_name: str) -> str:
    """File name without its last extension."""
    stem, dot, _ = file_name.rpartition(".")
    return stem if dot else file_name


@dataclass(frozen=True)
class NewDocument:
    """A fully assembled document record, ready for its single insert."""

    title: str
    file_name: str
    file_url: str
    file_type: str
    file_size: int
    user_id: str
    created_at: str
    metadata: DerivedMetadata
    extracted_text: str | None = None
    findings: FindingsRecord | None = None
    processed_at: str | None = None

    def ai_analysis_payload(self) -> dict[str, object] | None:
        if self.findings is None:
            return None
        return self.findings.to_payload(
            document_title=self.title,
            processed_at=self.processed_at or self.created_at,
        )


@dataclass(frozen=True)
class IngestedDocument:
    """A persisted document and the identifier the database assigned to it."""

    id: str
    document: NewDocument

    @property
    def processing_status(self) -> str:
        return self.document.metadata.processing_status
