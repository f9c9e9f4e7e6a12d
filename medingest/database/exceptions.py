class PersistenceError(Exception):
    """Raised when a document record cannot be written or read."""


class DocumentNotFoundError(PersistenceError):
    """Raised when a document cannot be found in the database."""
