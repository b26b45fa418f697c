from dataclasses import dataclass

DEFAULT_TEMPLATE = "modern"


@dataclass(frozen=True)
class IngestUpload:
    """Decoded multipart request body for one generation request."""

    file_name: str
    content_type: str
    data: bytes
    template: str = DEFAULT_TEMPLATE
    visitor_id: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class BatchResult:
    """Artifact returned by the batch endpoint."""

    html: str
    stored_path: str | None = None
