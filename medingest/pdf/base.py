from abc import ABC, abstractmethod

from medingest.pdf.models import ExtractedText


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        """Extract page-delimited text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            ExtractedText with one segment per page, in page order.
            Zero-page or text-free documents yield an empty full_text.

        Raises:
            ExtractionError: if the buffer is not a readable PDF.
        """

    @staticmethod
    def join_tokens(tokens: list[str]) -> str:
        """Join recognized word tokens of a page with single spaces."""
        return " ".join(token for token in tokens if token)
