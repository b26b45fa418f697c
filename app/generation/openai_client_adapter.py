from collections.abc import Iterator
from typing import Any

import httpx
import openai

from app.generation.client_base import BaseGenerationClient
from app.generation.exceptions import BackendAuthError, BackendError


class OpenAIClientAdapter(BaseGenerationClient):
    """Generation AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        provider: str = "openai",
        api_key_env: str = "",
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._provider = provider
        self._api_key_env = api_key_env or f"{provider.upper()}_API_KEY"

    def create_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int,
    ) -> Any:
        try:
            return self._client.chat.completions.create(
                model=model,
                max_tokens=max_output_tokens,
                messages=self._messages(system_prompt, user_prompt),
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise BackendError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise self._api_error(exc) from exc

    def stream_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int,
    ) -> Iterator[Any]:
        try:
            stream = self._client.chat.completions.create(
                model=model,
                max_tokens=max_output_tokens,
                messages=self._messages(system_prompt, user_prompt),
                stream=True,
            )
            with stream:
                yield from stream
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise BackendError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise self._api_error(exc) from exc

    @staticmethod
    def _messages(system_prompt: str, user_prompt: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

    def _api_error(self, exc: openai.APIError) -> BackendError:
        if self._is_auth_failure(exc):
            return BackendAuthError(
                f"Invalid {self._provider} API key. Set {self._api_key_env} in .env "
                "to a valid key (no quotes or spaces)."
            )
        return BackendError(f"AI provider API error: {exc}")

    @staticmethod
    def _is_auth_failure(exc: openai.APIError) -> bool:
        if isinstance(exc, openai.AuthenticationError):
            return True
        # Some OpenAI-compatible endpoints answer a bad key with 400/403.
        if isinstance(exc, openai.APIStatusError):
            message = str(exc).lower()
            return "api key" in message or "api_key" in message
        return False
