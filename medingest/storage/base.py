from abc import ABC, abstractmethod

CACHE_CONTROL_SECONDS = 3600


class BaseObjectStore(ABC):
    """Contract for object store adapters."""

    @abstractmethod
    def put(self, key: str, content: bytes, content_type: str) -> str:
        """Store bytes under key and return a publicly resolvable URL.

        Existing keys are never overwritten.

        Raises:
            StorageError: if the object cannot be stored.
        """
