class IngestionError(Exception):
    """Base exception for ingestion-level failures."""


class ValidationError(IngestionError):
    """Raised when the file or title is rejected before any stage runs."""
