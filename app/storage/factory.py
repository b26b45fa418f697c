from supabase import create_client

from app.config.settings import Settings
from app.logging.logger import Log
from app.storage.base import BaseBlobStore
from app.storage.supabase_adapter import SupabaseBlobStore


class BlobStoreFactory:
    """Creates the blob store, or None when storage is not configured."""

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStore | None:
        reasons = cls._missing_configuration(settings)
        if reasons:
            Log.info(f"Blob storage disabled: {'; '.join(reasons)}")
            return None
        try:
            client = create_client(settings.supabase_url, settings.supabase_service_role_key)
        except Exception as exc:
            Log.warning(f"Supabase client init failed, storage disabled: {exc}")
            return None
        Log.info(f"Supabase storage initialized, bucket={settings.supabase_bucket}")
        return SupabaseBlobStore(
            client=client,
            bucket=settings.supabase_bucket,
            max_file_bytes=settings.storage_max_file_bytes,
        )

    @staticmethod
    def _missing_configuration(settings: Settings) -> list[str]:
        reasons = []
        if not settings.supabase_url:
            reasons.append("SUPABASE_URL missing")
        elif not settings.supabase_url.startswith("https://"):
            reasons.append("SUPABASE_URL must start with https://")
        if not settings.supabase_service_role_key:
            reasons.append("SUPABASE_SERVICE_ROLE_KEY missing")
        return reasons
