from pathlib import Path

import pytest

from medingest.analysis.factory import AnalyzerFactory
from medingest.config.settings import Settings
from medingest.database.repositories.documents_repository import DocumentsRepository
from medingest.ingestion.models import SourceFile
from medingest.ingestion.orchestrator import IngestionOrchestrator
from medingest.pdf.pdfplumber_adapter import PdfPlumberAdapter
from medingest.storage.local_adapter import LocalObjectStore


def _orchestrator(tmp_path: Path) -> IngestionOrchestrator:
    settings = Settings(_env_file=None, analysis_provider="example")
    return IngestionOrchestrator(
        pdf_extractor=PdfPlumberAdapter(),
        analyzer=AnalyzerFactory.create(settings),
        object_store=LocalObjectStore(root=tmp_path, bucket="medical-documents"),
        doc_repo=DocumentsRepository(),
    )


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ingest_pdf_end_to_end(
    tmp_path: Path,
    lab_report_pdf_bytes: bytes,
    integration_cleanup: list[str],
) -> None:
    source = SourceFile(
        file_name="kidney.pdf", content=lab_report_pdf_bytes, media_type="application/pdf"
    )
    result = await _orchestrator(tmp_path).ingest(source, "Kidney Oct", "integration-user")
    integration_cleanup.append(result.id)

    stored = tmp_path / "medical-documents" / result.document.file_name
    assert stored.read_bytes() == lab_report_pdf_bytes

    record = DocumentsRepository().find_by_id(result.id)
    assert record.processing_status == "completed"
    assert record.category == "General Medical Report"
    assert record.anomaly_count == 0
    assert record.file_url == stored.resolve().as_uri()
    assert "=== Page 2 ===" in record.extracted_text
    assert "Creatinine" in record.extracted_text
    assert record.ai_analysis["reportTitle"] == "Medical Report"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ingest_image_without_analysis(
    tmp_path: Path,
    integration_cleanup: list[str],
) -> None:
    source = SourceFile(file_name="xray.png", content=b"\x89PNG\r\n", media_type="image/png")
    result = await _orchestrator(tmp_path).ingest(source, "Chest X-ray", "integration-user")
    integration_cleanup.append(result.id)

    record = DocumentsRepository().find_by_id(result.id)
    assert record.processing_status == "uploaded_without_analysis"
    assert record.category == "Uncategorized"
    assert record.anomalies == []
    assert record.ai_analysis is None
    assert record.file_name.endswith("-Chest_X-ray.png")
