from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class BaseGenerationClient(ABC):
    """Contract for provider-specific generation AI clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int,
    ) -> Any:
        """Return the provider's raw response object."""

    @abstractmethod
    def stream_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int,
    ) -> Iterator[Any]:
        """Yield the provider's raw streaming chunks."""
