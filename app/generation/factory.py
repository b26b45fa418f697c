from app.generation.base import BaseGenerator
from app.generation.models import BackendConfig
from app.generation.openai_client_adapter import OpenAIClientAdapter
from app.generation.placeholder_generator import PlaceholderGenerator
from app.generation.site_generator import SiteGenerator
from app.logging.logger import Log


class GeneratorFactory:
    """Creates the generator for the first configured backend."""

    @classmethod
    def create(cls, config: BackendConfig) -> BaseGenerator:
        """Walk providers in preference order; fall back to the placeholder."""
        provider = config.preferred()
        if provider is None:
            Log.warning("No generation backend configured, using placeholder output")
            return PlaceholderGenerator()

        Log.info(f"Generation backend: {provider.name} (model={provider.model})")
        client = OpenAIClientAdapter(
            api_key=provider.api_key,
            timeout_seconds=provider.timeout_seconds,
            base_url=provider.base_url,
            provider=provider.name,
            api_key_env=provider.api_key_env,
        )
        return SiteGenerator(
            client=client,
            model=provider.model,
            max_output_tokens=provider.max_output_tokens,
        )
