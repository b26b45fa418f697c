class DecodeError(Exception):
    """Base exception for document decoding failures."""


class UnsupportedMediaType(DecodeError):
    """Raised when no extractor handles the declared media type or extension."""


class UnreadableDocument(DecodeError):
    """Raised when a document is corrupt, encrypted, or too small to parse."""
