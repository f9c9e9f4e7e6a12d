import asyncio
from collections.abc import Callable
from datetime import datetime

from medingest.analysis.base import BaseAnalyzer
from medingest.analysis.exceptions import AnalysisError
from medingest.database.exceptions import PersistenceError
from medingest.database.repositories.documents_repository import DocumentsRepository
from medingest.ingestion.models import IngestionState, NewDocument
from medingest.ingestion.pipeline import (
    ANALYSIS_FAILED_MESSAGE,
    ANALYZING_MESSAGE,
    EXTRACTING_MESSAGE,
    SAVING_MESSAGE,
    UPLOADING_MESSAGE,
    IngestionContext,
    PipelineStep,
)
from medingest.logging.logger import Log
from medingest.metadata.deriver import derive
from medingest.pdf.base import BasePdfExtractor
from medingest.storage.base import BaseObjectStore
from medingest.storage.keys import build_storage_key

Clock = Callable[[], datetime]


class ExtractTextStep(PipelineStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    async def run(self, context: IngestionContext) -> IngestionContext:
        if not context.source.is_pdf:
            return context
        context.transition(IngestionState.EXTRACTING)
        context.report(EXTRACTING_MESSAGE)
        context.extracted_text = await asyncio.to_thread(
            self._pdf_extractor.extract, context.source.content
        )
        Log.info(
            f"Extracted {len(context.extracted_text.full_text)} chars from "
            f"{context.extracted_text.page_count} pages of '{context.source.file_name}'"
        )
        return context


class AnalyzeStep(PipelineStep):
    """Runs the model; analysis-layer errors never abort the pipeline."""

    def __init__(self, analyzer: BaseAnalyzer, clock: Clock) -> None:
        self._analyzer = analyzer
        self._clock = clock

    async def run(self, context: IngestionContext) -> IngestionContext:
        text = context.extracted_text.full_text if context.extracted_text else ""
        if not text:
            if context.source.is_pdf:
                Log.warning(
                    f"No text extracted from '{context.source.file_name}', skipping analysis"
                )
            context.transition(IngestionState.ANALYSIS_SKIPPED_OR_FAILED)
            return context

        context.transition(IngestionState.ANALYZING)
        context.report(ANALYZING_MESSAGE)
        try:
            context.raw_analysis = await self._analyzer.analyze(text, context.prompt_override)
        except AnalysisError as exc:
            Log.warning(f"AI analysis failed for '{context.title}', continuing without it: {exc}")
            context.report(ANALYSIS_FAILED_MESSAGE)
            context.transition(IngestionState.ANALYSIS_SKIPPED_OR_FAILED)
            return context

        context.findings = self._analyzer.parse(context.raw_analysis)
        context.analyzed_at = self._clock()
        Log.info(
            f"Analyzed '{context.title}': {len(context.findings.tests)} abnormal tests"
            + (" (fallback)" if context.findings.is_fallback else "")
        )
        return context


class DeriveMetadataStep(PipelineStep):
    async def run(self, context: IngestionContext) -> IngestionContext:
        context.metadata = derive(context.findings)
        return context


class UploadStep(PipelineStep):
    def __init__(self, object_store: BaseObjectStore) -> None:
        self._object_store = object_store

    async def run(self, context: IngestionContext) -> IngestionContext:
        context.transition(IngestionState.UPLOADING)
        context.report(UPLOADING_MESSAGE)
        context.storage_key = build_storage_key(
            user_id=context.user_id,
            timestamp_ms=int(context.started_at.timestamp() * 1000),
            title=context.title,
            file_name=context.source.file_name,
        )
        context.file_url = await asyncio.to_thread(
            self._object_store.put,
            context.storage_key,
            context.source.content,
            context.source.media_type,
        )
        Log.info(
            "Uploaded file", key=context.storage_key, size_bytes=context.source.size_bytes
        )
        return context


class PersistStep(PipelineStep):
    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    async def run(self, context: IngestionContext) -> IngestionContext:
        context.transition(IngestionState.PERSISTING)
        context.report(SAVING_MESSAGE)
        extracted = context.extracted_text.full_text if context.extracted_text else ""
        context.document = NewDocument(
            title=context.title,
            file_name=context.storage_key,
            file_url=context.file_url,
            file_type=context.source.media_type,
            file_size=context.source.size_bytes,
            user_id=context.user_id,
            created_at=context.started_at.isoformat(),
            metadata=context.metadata,
            extracted_text=extracted or None,
            findings=context.findings,
            processed_at=context.analyzed_at.isoformat() if context.analyzed_at else None,
        )
        try:
            context.document_id = await asyncio.to_thread(self._doc_repo.insert, context.document)
        except PersistenceError:
            Log.error(
                "Stored file has no document record after a failed database write",
                key=context.storage_key,
            )
            raise
        Log.info(
            "Document saved",
            document_id=context.document_id,
            status=context.metadata.processing_status,
        )
        return context
