from typing import Any

from app.logging.logger import Log
from app.storage.base import BaseBlobStore
from app.storage.exceptions import StorageDegraded

ALLOWED_MIME_TYPES = [
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
]


class SupabaseBlobStore(BaseBlobStore):
    """Stores uploads in a private Supabase Storage bucket.

    The bucket is created on first use when the upload reports it missing.
    """

    def __init__(self, client: Any, bucket: str, max_file_bytes: int) -> None:
        self._client = client
        self._bucket = bucket
        self._max_file_bytes = max_file_bytes

    def put(self, key: str, data: bytes, content_type: str) -> str:
        Log.info(f"Storage upload starting, bucket={self._bucket} key={key}")
        try:
            result = self._upload(key, data, content_type)
        except Exception as exc:
            if "bucket not found" not in str(exc).lower():
                raise StorageDegraded(f"Storage upload failed: {exc}") from exc
            self._create_bucket()
            try:
                result = self._upload(key, data, content_type)
            except Exception as retry_exc:
                raise StorageDegraded(f"Storage upload failed: {retry_exc}") from retry_exc

        path = getattr(result, "path", None) or key
        Log.info(f"Storage upload OK, path={path}")
        return path

    def _upload(self, key: str, data: bytes, content_type: str) -> Any:
        return self._client.storage.from_(self._bucket).upload(
            path=key,
            file=data,
            file_options={"content-type": content_type, "upsert": "false"},
        )

    def _create_bucket(self) -> None:
        Log.info(f"Bucket missing, creating {self._bucket}")
        try:
            self._client.storage.create_bucket(
                self._bucket,
                options={
                    "public": False,
                    "file_size_limit": self._max_file_bytes,
                    "allowed_mime_types": ALLOWED_MIME_TYPES,
                },
            )
        except Exception as exc:
            raise StorageDegraded(f"Bucket create failed: {exc}") from exc
