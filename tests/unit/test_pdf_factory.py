import threading
from collections.abc import Generator
from unittest.mock import patch

import pytest

from medingest.pdf.factory import PdfExtractorFactory
from medingest.pdf.pdfplumber_adapter import PdfPlumberAdapter
from medingest.pdf.pymupdf_adapter import PyMuPdfAdapter


def _make_settings(pdf_engine: str):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only pdf_engine."""
    with patch("medingest.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        return settings


@pytest.fixture(autouse=True)
def _reset_shared() -> Generator[None, None, None]:
    PdfExtractorFactory.reset()
    yield
    PdfExtractorFactory.reset()


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("PdfPlumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(_make_settings("unknown"))


class TestSharedExtractor:
    def test_returns_same_instance(self) -> None:
        settings = _make_settings("pdfplumber")
        assert PdfExtractorFactory.shared(settings) is PdfExtractorFactory.shared(settings)

    def test_ignores_settings_after_first_use(self) -> None:
        first = PdfExtractorFactory.shared(_make_settings("pymupdf"))
        second = PdfExtractorFactory.shared(_make_settings("pdfplumber"))
        assert isinstance(second, PyMuPdfAdapter)
        assert first is second

    def test_initializes_once_under_concurrent_first_use(self) -> None:
        settings = _make_settings("pdfplumber")
        barrier = threading.Barrier(8)
        results: list[object] = []

        def worker() -> None:
            barrier.wait()
            results.append(PdfExtractorFactory.shared(settings))

        with patch.object(
            PdfExtractorFactory, "create", wraps=PdfExtractorFactory.create
        ) as create:
            threads = [threading.Thread(target=worker) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert create.call_count == 1
        assert len({id(result) for result in results}) == 1

    def test_reset_drops_instance(self) -> None:
        settings = _make_settings("pdfplumber")
        first = PdfExtractorFactory.shared(settings)
        PdfExtractorFactory.reset()
        assert PdfExtractorFactory.shared(settings) is not first
