from pathlib import Path
from urllib.parse import quote

from medingest.storage.base import BaseObjectStore
from medingest.storage.exceptions import StorageError


class LocalObjectStore(BaseObjectStore):
    """Stores objects as files under {root}/{bucket}/{key}."""

    def __init__(self, root: Path, bucket: str, public_base_url: str = "") -> None:
        self._bucket_dir = root / bucket
        self._bucket = bucket
        self._public_base_url = public_base_url.rstrip("/")

    def put(self, key: str, content: bytes, content_type: str) -> str:
        path = self._resolve_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("xb") as fh:
                fh.write(content)
        except FileExistsError as exc:
            raise StorageError(f"Object already exists: {key}") from exc
        except OSError as exc:
            raise StorageError(f"Local storage write failed for {key}: {exc}") from exc
        return self._public_url(key, path)

    def _resolve_path(self, key: str) -> Path:
        path = (self._bucket_dir / key).resolve()
        if not path.is_relative_to(self._bucket_dir.resolve()):
            raise StorageError(f"Storage key escapes bucket: {key}")
        return path

    def _public_url(self, key: str, path: Path) -> str:
        if not self._public_base_url:
            return path.as_uri()
        return f"{self._public_base_url}/{self._bucket}/{quote(key)}"
