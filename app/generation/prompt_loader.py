from pathlib import Path

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt_template(path: Path | None = None) -> str:
    """Load the system instruction template from a file.

    Args:
        path: Path to the template file.
              Defaults to the bundled system_prompt.txt.

    Returns:
        The raw template string with a {template} placeholder.

    Raises:
        OSError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    return path.read_text(encoding="utf-8").strip()


def load_user_prompt_template(path: Path | None = None) -> str:
    """Load the user message template ({cleaned_text} placeholder) from a file."""
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "user_prompt.txt"
    return path.read_text(encoding="utf-8").rstrip("\n")
