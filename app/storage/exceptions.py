class StorageDegraded(Exception):
    """Raised when the blob or tracking store is unreachable or rejects a write.

    Never fatal: callers log it and carry on without the stored artifact.
    """
