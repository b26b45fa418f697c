class BackendError(Exception):
    """Raised when the generative backend fails to produce output."""


class BackendAuthError(BackendError):
    """Raised when the backend rejects the configured credential."""
