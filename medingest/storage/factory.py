from pathlib import Path

from medingest.config.settings import Settings
from medingest.storage.base import BaseObjectStore
from medingest.storage.local_adapter import LocalObjectStore
from medingest.storage.s3_adapter import S3ObjectStore


class ObjectStoreFactory:
    """Creates the object store backend selected in settings."""

    BACKENDS = ("local", "s3")

    @classmethod
    def create(cls, settings: Settings) -> BaseObjectStore:
        backend = settings.storage_backend.lower()
        if backend == "local":
            return LocalObjectStore(
                root=Path(settings.storage_local_root),
                bucket=settings.storage_bucket,
                public_base_url=settings.storage_public_base_url,
            )
        if backend == "s3":
            return S3ObjectStore(
                bucket=settings.storage_bucket,
                region=settings.storage_s3_region,
                public_base_url=settings.storage_public_base_url,
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
