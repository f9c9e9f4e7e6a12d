from dataclasses import dataclass, field

PAGE_HEADER = "=== Page {number} ==="


@dataclass(frozen=True)
class PageSegment:
    """Text of one page: its word tokens joined by single spaces."""

    page_number: int
    text: str


@dataclass(frozen=True)
class ExtractedText:
    """Ordered page segments of a PDF, one per page."""

    segments: tuple[PageSegment, ...] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        return len(self.segments)

    @property
    def full_text(self) -> str:
        """Page-delimited text, empty when no page carries any text."""
        if not any(segment.text for segment in self.segments):
            return ""
        parts = [
            f"\n\n{PAGE_HEADER.format(number=segment.page_number)}\n{segment.text}"
            for segment in self.segments
        ]
        return "".join(parts).strip()

    @classmethod
    def from_pages(cls, pages: list[str]) -> "ExtractedText":
        """Build segments from per-page texts, numbering pages from 1."""
        return cls(
            segments=tuple(
                PageSegment(page_number=number, text=text)
                for number, text in enumerate(pages, start=1)
            )
        )
