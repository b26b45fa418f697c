class ProcessorError(Exception):
    """Base exception for request validation failures in the pipeline."""


class EmptyUpload(ProcessorError):
    """Raised when the uploaded file carries no bytes."""


class EmptyPayload(ProcessorError):
    """Raised when nothing usable is left after cleaning the extracted text."""
