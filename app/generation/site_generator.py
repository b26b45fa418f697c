"""AI-powered resume-to-HTML generator."""

from collections.abc import Iterator
from pathlib import Path

from app.generation.base import BaseGenerator
from app.generation.client_base import BaseGenerationClient
from app.generation.extraction import extract_text
from app.generation.postprocess import strip_code_fences
from app.generation.prompt_loader import load_system_prompt_template, load_user_prompt_template
from app.logging.logger import Log


class SiteGenerator(BaseGenerator):
    """Generates a single-page HTML site from resume text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        model: str,
        max_output_tokens: int = 8192,
        system_prompt_path: Path | None = None,
        user_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self.model_id = model
        self._max_output_tokens = max_output_tokens
        self._system_template = load_system_prompt_template(system_prompt_path)
        self._user_template = load_user_prompt_template(user_prompt_path)

    def generate(self, cleaned_text: str, template: str) -> str:
        system_prompt, user_prompt = self._build_prompts(cleaned_text, template)
        Log.info(
            f"Generation request: model={self.model_id}, "
            f"prompt length={len(system_prompt) + len(user_prompt)}"
        )
        response = self._client.create_completion(
            model=self.model_id,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_output_tokens=self._max_output_tokens,
        )
        html = strip_code_fences(extract_text(response))
        if not html:
            Log.warning(f"Model {self.model_id} returned empty or unexpected response shape")
        return html

    def generate_stream(self, cleaned_text: str, template: str) -> Iterator[str]:
        system_prompt, user_prompt = self._build_prompts(cleaned_text, template)
        Log.info(
            f"Streaming request: model={self.model_id}, "
            f"prompt length={len(system_prompt) + len(user_prompt)}"
        )
        chunks = self._client.stream_completion(
            model=self.model_id,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_output_tokens=self._max_output_tokens,
        )
        try:
            for chunk in chunks:
                text = extract_text(chunk)
                if not text:
                    Log.debug("Skipping stream chunk without text")
                    continue
                yield text
        finally:
            close = getattr(chunks, "close", None)
            if close is not None:
                close()

    def _build_prompts(self, cleaned_text: str, template: str) -> tuple[str, str]:
        system_prompt = self._system_template.format(template=template)
        user_prompt = self._user_template.format(cleaned_text=cleaned_text)
        return system_prompt, user_prompt
