from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.processor.models import IngestUpload


@dataclass(slots=True)
class PipelineContext:
    upload: IngestUpload
    stored_path: str | None = None
    upload_id: str | None = None
    raw_text: str = ""
    cleaned_text: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
