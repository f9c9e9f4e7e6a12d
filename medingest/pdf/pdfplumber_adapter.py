import io

import pdfplumber

from medingest.pdf.base import BasePdfExtractor
from medingest.pdf.exceptions import ExtractionError
from medingest.pdf.models import ExtractedText


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page text from PDF using pdfplumber word tokens."""

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [
                    self.join_tokens([word["text"] for word in page.extract_words()])
                    for page in pdf.pages
                ]
            return ExtractedText.from_pages(pages)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
