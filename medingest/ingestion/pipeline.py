from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from medingest.analysis.models import FindingsRecord
from medingest.ingestion.models import IngestionState, NewDocument, SourceFile
from medingest.logging.logger import Log
from medingest.metadata.models import DerivedMetadata, UnanalyzedMetadata
from medingest.pdf.models import ExtractedText

ProgressCallback = Callable[[str], None]

EXTRACTING_MESSAGE = "Extracting text from PDF..."
ANALYZING_MESSAGE = "Analyzing with AI..."
ANALYSIS_FAILED_MESSAGE = "AI analysis failed, upload will continue."
UPLOADING_MESSAGE = "Uploading file to storage..."
SAVING_MESSAGE = "Saving document metadata..."
DONE_MESSAGE = "Done"


@dataclass(slots=True)
class IngestionContext:
    source: SourceFile
    title: str
    user_id: str
    started_at: datetime
    prompt_override: str | None = None
    on_progress: ProgressCallback | None = None
    state: IngestionState = IngestionState.IDLE
    progress_messages: list[str] = field(default_factory=list)
    extracted_text: ExtractedText | None = None
    raw_analysis: str | None = None
    findings: FindingsRecord | None = None
    analyzed_at: datetime | None = None
    metadata: DerivedMetadata = field(default_factory=UnanalyzedMetadata)
    storage_key: str = ""
    file_url: str = ""
    document: NewDocument | None = None
    document_id: str = ""

    def transition(self, state: IngestionState) -> None:
        Log.debug(f"Ingestion of '{self.title}': {self.state.value} -> {state.value}")
        self.state = state

    def report(self, message: str) -> None:
        """Record a progress message and forward it to the presentation layer."""
        self.progress_messages.append(message)
        if self.on_progress is not None:
            self.on_progress(message)


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: IngestionContext) -> IngestionContext:
        raise NotImplementedError
