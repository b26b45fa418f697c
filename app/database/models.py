from dataclasses import dataclass
from datetime import datetime


@dataclass
class UploadRecord:
    """Represents a row from the resume_uploads table."""

    file_name: str
    file_size: int
    template: str
    visitor_id: str | None = None
    storage_path: str | None = None
    id: str | None = None
    created_at: datetime | None = None


@dataclass
class GenerationResult:
    """Represents a row from the generation_results table."""

    resume_upload_id: str
    llm_model: str
    llm_html: str | None = None
    id: str | None = None
    created_at: datetime | None = None
