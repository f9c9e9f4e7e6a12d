import threading
from typing import ClassVar

import pymupdf

from medingest.pdf.base import BasePdfExtractor
from medingest.pdf.exceptions import ExtractionError
from medingest.pdf.models import ExtractedText

# Index of the word string inside a tuple returned by page.get_text("words").
_WORD_TEXT_INDEX = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text from PDF using PyMuPDF word tokens.

    MuPDF must not be entered from several threads at once, so extractions
    are serialized across all instances.
    """

    _lock: ClassVar[threading.Lock] = threading.Lock()

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        with self._lock:
            try:
                doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
                with doc:
                    pages = [
                        self.join_tokens(
                            [word[_WORD_TEXT_INDEX] for word in page.get_text("words")]
                        )
                        for page in doc
                    ]
            except Exception as exc:
                raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return ExtractedText.from_pages(pages)
