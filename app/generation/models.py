from dataclasses import dataclass

from app.config.settings import Settings


@dataclass(frozen=True)
class ProviderConfig:
    """Connection settings for one generative backend."""

    name: str
    api_key: str
    model: str
    base_url: str | None = None
    api_key_env: str = ""
    timeout_seconds: int = 120
    max_output_tokens: int = 8192

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class BackendConfig:
    """Backends in preference order; the first configured one is used."""

    providers: tuple[ProviderConfig, ...] = ()

    @classmethod
    def from_settings(cls, settings: Settings) -> "BackendConfig":
        return cls(
            providers=(
                ProviderConfig(
                    name="gemini",
                    api_key=settings.gemini_api_key,
                    model=settings.gemini_model_name,
                    base_url=settings.gemini_base_url or None,
                    api_key_env="GEMINI_API_KEY",
                    timeout_seconds=settings.generation_timeout_seconds,
                    max_output_tokens=settings.generation_max_output_tokens,
                ),
                ProviderConfig(
                    name="anthropic",
                    api_key=settings.anthropic_api_key,
                    model=settings.anthropic_model_name,
                    base_url=settings.anthropic_base_url or None,
                    api_key_env="ANTHROPIC_API_KEY",
                    timeout_seconds=settings.generation_timeout_seconds,
                    max_output_tokens=settings.generation_max_output_tokens,
                ),
            )
        )

    def preferred(self) -> ProviderConfig | None:
        return next((p for p in self.providers if p.configured), None)
