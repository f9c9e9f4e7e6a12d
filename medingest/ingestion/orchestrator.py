"""Document ingestion: extract -> analyze -> derive -> upload -> persist."""

import asyncio
from datetime import datetime, timezone

from medingest.analysis.base import BaseAnalyzer
from medingest.analysis.factory import AnalyzerFactory
from medingest.config.settings import Settings
from medingest.database.repositories.documents_repository import DocumentsRepository
from medingest.ingestion.exceptions import ValidationError
from medingest.ingestion.models import IngestedDocument, IngestionState, SourceFile
from medingest.ingestion.pipeline import (
    ANALYZING_MESSAGE,
    DONE_MESSAGE,
    EXTRACTING_MESSAGE,
    IngestionContext,
    PipelineStep,
    ProgressCallback,
)
from medingest.ingestion.steps import (
    AnalyzeStep,
    Clock,
    DeriveMetadataStep,
    ExtractTextStep,
    PersistStep,
    UploadStep,
)
from medingest.ingestion.validation import MAX_FILE_SIZE_BYTES, validate_file, validate_source
from medingest.logging.logger import Log
from medingest.pdf.base import BasePdfExtractor
from medingest.pdf.factory import PdfExtractorFactory
from medingest.pdf.models import ExtractedText
from medingest.storage.base import BaseObjectStore
from medingest.storage.factory import ObjectStoreFactory


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IngestionOrchestrator:
    """Runs one ingestion call end to end.

    Extraction, storage and database failures abort the call. Analysis
    failures only downgrade the record to `uploaded_without_analysis`; the
    file is still uploaded and saved. A database failure after a successful
    upload leaves the stored file without a record.
    """

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        analyzer: BaseAnalyzer,
        object_store: BaseObjectStore,
        doc_repo: DocumentsRepository,
        max_file_size_bytes: int = MAX_FILE_SIZE_BYTES,
        clock: Clock = _utcnow,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._analyzer = analyzer
        self._max_file_size_bytes = max_file_size_bytes
        self._clock = clock
        self._steps: list[PipelineStep] = [
            ExtractTextStep(pdf_extractor=pdf_extractor),
            AnalyzeStep(analyzer=analyzer, clock=clock),
            DeriveMetadataStep(),
            UploadStep(object_store=object_store),
            PersistStep(doc_repo=doc_repo),
        ]

    async def ingest(
        self,
        source: SourceFile | None,
        title: str | None,
        user_id: str,
        *,
        prompt_override: str | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> IngestedDocument:
        """Ingest one file and return the persisted document.

        Raises:
            ValidationError: before any stage, on bad input.
            ExtractionError: if the PDF cannot be read.
            StorageError: if the upload fails; nothing is written to the database.
            PersistenceError: if the database write fails after the upload.
        """
        source = validate_source(source, title, self._max_file_size_bytes)
        context = IngestionContext(
            source=source,
            title=(title or "").strip(),
            user_id=user_id,
            started_at=self._clock(),
            prompt_override=prompt_override,
            on_progress=on_progress,
        )
        Log.info(
            f"Ingesting '{context.title}' ({source.media_type}, {source.size_bytes} bytes) "
            f"for user {user_id}"
        )
        try:
            for step in self._steps:
                context = await step.run(context)
        except Exception:
            Log.exception(f"Ingestion of '{context.title}' failed while {context.state.value}")
            context.transition(IngestionState.FAILED)
            raise

        context.transition(IngestionState.DONE)
        context.report(DONE_MESSAGE)
        if context.document is None:
            raise RuntimeError("Pipeline finished without assembling a document")
        return IngestedDocument(id=context.document_id, document=context.document)

    async def preview_extraction(
        self,
        source: SourceFile,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractedText:
        """Extract text from a PDF without uploading or saving anything."""
        self._require_pdf(source, "Text extraction")
        if on_progress is not None:
            on_progress(EXTRACTING_MESSAGE)
        return await asyncio.to_thread(self._pdf_extractor.extract, source.content)

    async def preview_analysis(
        self,
        source: SourceFile,
        prompt_override: str | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Extract and analyze a PDF, returning the raw model output.

        Unlike ingest(), analysis errors propagate to the caller.
        """
        extracted = await self.preview_extraction(source, on_progress)
        if on_progress is not None:
            on_progress(ANALYZING_MESSAGE)
        return await self._analyzer.analyze(extracted.full_text, prompt_override)

    def _require_pdf(self, source: SourceFile, action: str) -> None:
        validate_file(source, self._max_file_size_bytes)
        if not source.is_pdf:
            raise ValidationError(f"{action} is available for PDF files only")


def build_orchestrator(settings: Settings) -> IngestionOrchestrator:
    """Build an IngestionOrchestrator with the adapters selected in settings."""
    return IngestionOrchestrator(
        pdf_extractor=PdfExtractorFactory.shared(settings),
        analyzer=AnalyzerFactory.create(settings),
        object_store=ObjectStoreFactory.create(settings),
        doc_repo=DocumentsRepository(),
        max_file_size_bytes=settings.max_file_size_bytes,
    )
