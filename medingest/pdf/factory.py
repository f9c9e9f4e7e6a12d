import threading
from typing import ClassVar

from medingest.config.settings import Settings
from medingest.logging.logger import Log
from medingest.pdf.base import BasePdfExtractor
from medingest.pdf.pdfplumber_adapter import PdfPlumberAdapter
from medingest.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the PDF extractor selected in settings.

    `shared()` hands out one process-wide extractor, built at most once
    even when several ingestions reach it concurrently.
    """

    ADAPTERS: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    _shared: ClassVar[BasePdfExtractor | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def shared(cls, settings: Settings) -> BasePdfExtractor:
        if cls._shared is None:
            with cls._lock:
                if cls._shared is None:
                    cls._shared = cls.create(settings)
                    Log.info("Initialized PDF engine", engine=settings.pdf_engine.lower())
        return cls._shared

    @classmethod
    def reset(cls) -> None:
        """Drop the shared extractor. Used by tests."""
        with cls._lock:
            cls._shared = None
