class StorageError(Exception):
    """Raised when the object store rejects or fails a put."""
