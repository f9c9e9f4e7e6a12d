import pytest

from medingest.pdf.exceptions import ExtractionError
from medingest.pdf.models import ExtractedText
from medingest.pdf.pdfplumber_adapter import PdfPlumberAdapter


class TestPdfPlumberAdapter:
    def test_extract_returns_page_delimited_text(self, sample_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(sample_pdf_bytes)
        assert isinstance(result, ExtractedText)
        assert result.full_text == "=== Page 1 ===\nHello PDF World"

    def test_extract_multi_page_keeps_page_order(self, multi_page_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(multi_page_pdf_bytes)
        assert [s.page_number for s in result.segments] == [1, 2]
        assert result.segments[0].text == "Page one content"
        assert result.segments[1].text == "Page two content"
        assert result.full_text.index("=== Page 1 ===") < result.full_text.index("=== Page 2 ===")

    def test_extract_one_header_per_page(self, lab_report_pdf_bytes: bytes) -> None:
        full_text = PdfPlumberAdapter().extract(lab_report_pdf_bytes).full_text
        assert full_text.count("=== Page 1 ===") == 1
        assert full_text.count("=== Page 2 ===") == 1
        assert "=== Page 3 ===" not in full_text

    def test_joins_tokens_with_single_spaces(self, lab_report_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(lab_report_pdf_bytes)
        assert "  " not in result.segments[0].text
        assert "Creatinine 1.9 mg/dL" in result.segments[0].text

    def test_extract_is_deterministic(self, multi_page_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        assert adapter.extract(multi_page_pdf_bytes) == adapter.extract(multi_page_pdf_bytes)

    def test_extract_empty_pdf_returns_empty_text(self, empty_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(empty_pdf_bytes)
        assert result.page_count == 1
        assert result.full_text == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(ExtractionError, match="pdfplumber"):
            PdfPlumberAdapter().extract(b"not a pdf")
