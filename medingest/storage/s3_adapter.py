from typing import Any
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from medingest.storage.base import CACHE_CONTROL_SECONDS, BaseObjectStore
from medingest.storage.exceptions import StorageError


class S3ObjectStore(BaseObjectStore):
    """Stores objects in an S3 bucket with a single put_object call."""

    def __init__(
        self,
        bucket: str,
        region: str,
        public_base_url: str = "",
        client: Any | None = None,
    ) -> None:
        self._bucket = bucket
        self._region = region
        self._public_base_url = public_base_url.rstrip("/")
        self._client = client if client is not None else boto3.client("s3", region_name=region)

    def put(self, key: str, content: bytes, content_type: str) -> str:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=content,
                ContentType=content_type,
                CacheControl=f"max-age={CACHE_CONTROL_SECONDS}",
                IfNoneMatch="*",
            )
        except ClientError as exc:
            error_code = exc.response.get("Error", {}).get("Code", "Unknown")
            raise StorageError(f"S3 upload failed [{error_code}] for {key}: {exc}") from exc
        except BotoCoreError as exc:
            raise StorageError(f"S3 upload failed for {key}: {exc}") from exc
        return self._public_url(key)

    def _public_url(self, key: str) -> str:
        if self._public_base_url:
            return f"{self._public_base_url}/{quote(key)}"
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{quote(key)}"
