from app.config.settings import Settings
from app.database.connection import is_pool_ready
from app.database.repositories.generation_results_repository import GenerationResultsRepository
from app.database.repositories.resume_uploads_repository import ResumeUploadsRepository
from app.decoder.factory import DecoderFactory
from app.generation.base import BaseGenerator
from app.generation.factory import GeneratorFactory
from app.generation.models import BackendConfig
from app.logging.logger import Log
from app.processor.models import BatchResult, IngestUpload
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    CleanStep,
    DecodeStep,
    RecordUploadStep,
    StoreBlobStep,
    ValidateUploadStep,
)
from app.relay.relay import Relay, RelaySession
from app.storage.base import BaseBlobStore
from app.storage.factory import BlobStoreFactory
from app.tracking.recorder import TrackingRecorder

NO_CONTENT_HTML = (
    "<!DOCTYPE html><html><body><p>No content returned from the generator.</p></body></html>"
)


class Processor:
    """Orchestrates one generation request.

    Pipeline: validate -> store blob -> record upload -> decode -> clean,
    then either a batch generation or a hand-off to the relay.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        generator: BaseGenerator,
        recorder: TrackingRecorder,
        relay: Relay,
    ) -> None:
        self._steps = steps
        self._generator = generator
        self._recorder = recorder
        self._relay = relay

    def prepare(self, upload: IngestUpload) -> PipelineContext:
        """Run every step before the backend call. Raises on validation failures."""
        context = PipelineContext(upload=upload)
        for step in self._steps:
            context = step.run(context)
        return context

    def generate(self, upload: IngestUpload) -> BatchResult:
        """Generate the artifact in one call and record it."""
        context = self.prepare(upload)
        Log.info(f"Calling generator (model={self._generator.model_id})")
        html = self._generator.generate(context.cleaned_text, upload.template)
        Log.info(f"Generator returned HTML length={len(html)}")
        if html:
            self._recorder.record_result(context.upload_id, self._generator.model_id, html)
        else:
            html = NO_CONTENT_HTML
        return BatchResult(html=html, stored_path=context.stored_path)

    def open_stream(self, upload: IngestUpload) -> RelaySession:
        """Prepare the request and return a relay session ready to stream."""
        context = self.prepare(upload)
        Log.info(f"Stream starting, cleaned length={len(context.cleaned_text)}")
        return self._relay.open(context.cleaned_text, upload.template, context.upload_id)


def build_processor(
    settings: Settings,
    blob_store: BaseBlobStore | None = None,
    generator: BaseGenerator | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if blob_store is None:
        blob_store = BlobStoreFactory.create(settings)
    if generator is None:
        generator = GeneratorFactory.create(BackendConfig.from_settings(settings))
    recorder = TrackingRecorder(
        uploads_repo=ResumeUploadsRepository(),
        results_repo=GenerationResultsRepository(),
        enabled=settings.tracking_enabled and is_pool_ready(),
    )
    decoder = DecoderFactory.create(settings)
    steps: list[PipelineStep] = [
        ValidateUploadStep(),
        StoreBlobStep(blob_store),
        RecordUploadStep(recorder),
        DecodeStep(decoder),
        CleanStep(),
    ]
    return Processor(
        steps=steps,
        generator=generator,
        recorder=recorder,
        relay=Relay(generator, recorder),
    )
