"""Generator used when no backend credential is configured.

No network calls. Keeps the pipeline usable in demo mode and in tests.
"""

import html
from collections.abc import Iterator

from app.generation.base import BaseGenerator

PLACEHOLDER_MODEL_ID = "placeholder"
_EXCERPT_CHARS = 500


class PlaceholderGenerator(BaseGenerator):
    """Returns a minimal valid HTML document explaining the missing configuration."""

    model_id = PLACEHOLDER_MODEL_ID

    def generate(self, cleaned_text: str, template: str) -> str:
        _ = template
        excerpt = html.escape(cleaned_text[:_EXCERPT_CHARS])
        return (
            '<!DOCTYPE html><html><head><meta charset="utf-8"><title>Resume Site</title>'
            "</head><body><h1>ResumeToSite</h1>"
            "<p>Set GEMINI_API_KEY or ANTHROPIC_API_KEY in .env to generate real content.</p>"
            f"<pre>{excerpt}</pre></body></html>"
        )

    def generate_stream(self, cleaned_text: str, template: str) -> Iterator[str]:
        yield self.generate(cleaned_text, template)
