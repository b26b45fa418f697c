"""Best-effort tracking of uploads and generation results.

Every public method logs and returns instead of raising when the tracking
store misbehaves.
"""

from collections.abc import Callable

from app.database.models import GenerationResult, UploadRecord
from app.database.repositories.generation_results_repository import GenerationResultsRepository
from app.database.repositories.resume_uploads_repository import ResumeUploadsRepository
from app.logging.logger import Log, mask_visitor_id
from app.storage.exceptions import StorageDegraded


class TrackingRecorder:
    """Records UploadRecord and GenerationResult rows in the tracking store."""

    def __init__(
        self,
        uploads_repo: ResumeUploadsRepository,
        results_repo: GenerationResultsRepository,
        enabled: bool = True,
    ) -> None:
        self._uploads_repo = uploads_repo
        self._results_repo = results_repo
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def record_upload(
        self,
        storage_path: str | None,
        file_name: str,
        file_size: int,
        template: str,
        visitor_id: str | None,
    ) -> str | None:
        """Insert an upload row. Returns its id, or None if tracking is unavailable."""
        if not self._enabled:
            Log.debug("record_upload skipped: tracking disabled")
            return None
        record = UploadRecord(
            storage_path=storage_path,
            file_name=file_name,
            file_size=file_size,
            template=template,
            visitor_id=visitor_id,
        )
        Log.info(f"resume_uploads insert attempting, visitor_id={mask_visitor_id(visitor_id)}")
        try:
            upload_id = self._insert(lambda: self._uploads_repo.insert(record), "resume_uploads")
        except StorageDegraded as exc:
            Log.warning(str(exc))
            return None
        Log.info(f"resume_uploads insert OK, id={upload_id}")
        return upload_id

    def record_result(self, upload_id: str | None, model_id: str, artifact: str | None) -> None:
        """Insert a generation row when both an upload id and a non-empty artifact exist."""
        if not self._enabled or not upload_id or not artifact:
            return
        result = GenerationResult(resume_upload_id=upload_id, llm_model=model_id, llm_html=artifact)
        try:
            self._insert(lambda: self._results_repo.insert(result), "generation_results")
        except StorageDegraded as exc:
            Log.warning(str(exc))
            return
        Log.info(f"generation_results saved for upload {upload_id}")

    @staticmethod
    def _insert(operation: Callable[[], str], table: str) -> str:
        try:
            return operation()
        except Exception as exc:
            raise StorageDegraded(f"{table} insert failed: {exc}") from exc
