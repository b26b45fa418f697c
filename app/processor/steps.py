import re
import time

from app.decoder.decoder import Decoder
from app.logging.logger import Log
from app.processor.exceptions import EmptyPayload, EmptyUpload
from app.processor.pipeline import PipelineContext, PipelineStep
from app.storage.base import BaseBlobStore
from app.storage.exceptions import StorageDegraded
from app.text.normalizer import clean
from app.tracking.recorder import TrackingRecorder

_UNSAFE_KEY_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def blob_key(file_name: str, now: float | None = None) -> str:
    """Build a storage key: <epoch-ms>-<sanitized file name>."""
    timestamp = int((time.time() if now is None else now) * 1000)
    return f"{timestamp}-{_UNSAFE_KEY_CHARS.sub('_', file_name or 'resume')}"


class ValidateUploadStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.upload.size == 0:
            raise EmptyUpload("File is empty. Please upload a valid resume file.")
        Log.info(
            f"Upload request: file={context.upload.file_name}, size={context.upload.size}"
        )
        return context


class StoreBlobStep(PipelineStep):
    def __init__(self, blob_store: BaseBlobStore | None) -> None:
        self._blob_store = blob_store

    def run(self, context: PipelineContext) -> PipelineContext:
        if self._blob_store is None:
            Log.debug("Blob storage skipped: not configured")
            return context
        upload = context.upload
        try:
            context.stored_path = self._blob_store.put(
                blob_key(upload.file_name),
                upload.data,
                upload.content_type or "application/octet-stream",
            )
        except StorageDegraded as exc:
            Log.warning(f"Continuing without stored file: {exc}")
        return context


class RecordUploadStep(PipelineStep):
    def __init__(self, recorder: TrackingRecorder) -> None:
        self._recorder = recorder

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        context.upload_id = self._recorder.record_upload(
            context.stored_path,
            upload.file_name,
            upload.size,
            upload.template,
            upload.visitor_id,
        )
        return context


class DecodeStep(PipelineStep):
    def __init__(self, decoder: Decoder) -> None:
        self._decoder = decoder

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        context.raw_text = self._decoder.decode(upload.data, upload.content_type, upload.file_name)
        Log.info(f"Extracted raw text length={len(context.raw_text)}")
        return context


class CleanStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.cleaned_text = clean(context.raw_text)
        if not context.cleaned_text:
            raise EmptyPayload(
                "Could not extract text from the file. Try a different file or paste text."
            )
        Log.info(
            f"Cleaned text length={len(context.cleaned_text)}, "
            f"template={context.upload.template}"
        )
        return context
