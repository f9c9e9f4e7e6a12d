class ExtractionError(Exception):
    """Raised when a document buffer cannot be opened or read as a PDF."""
