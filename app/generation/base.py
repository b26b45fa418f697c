from abc import ABC, abstractmethod
from collections.abc import Iterator


class BaseGenerator(ABC):
    """Contract for all site generators (batch and incremental)."""

    model_id: str

    @abstractmethod
    def generate(self, cleaned_text: str, template: str) -> str:
        """Generate a complete HTML document from cleaned resume text.

        Args:
            cleaned_text: Output of the text normalizer.
            template: Style selector embedded into the system instruction.

        Returns:
            Artifact HTML with any surrounding code fence removed. May be empty.

        Raises:
            BackendAuthError: if the backend rejects the credential.
            BackendError: on any other backend failure.
        """

    @abstractmethod
    def generate_stream(self, cleaned_text: str, template: str) -> Iterator[str]:
        """Yield artifact fragments in arrival order.

        The iterator is lazy, finite and not restartable. Backend failures are
        raised from the iterator itself.
        """
