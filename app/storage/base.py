from abc import ABC, abstractmethod


class BaseBlobStore(ABC):
    """Contract for uploaded-file storage backends."""

    @abstractmethod
    def put(self, key: str, data: bytes, content_type: str) -> str:
        """Store bytes under a key and return the stored path.

        Raises:
            StorageDegraded: if the store cannot accept the file.
        """
