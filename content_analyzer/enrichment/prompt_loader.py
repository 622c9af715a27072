from pathlib import Path

from content_analyzer.enrichment.exceptions import EnrichmentConfigurationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

SYSTEM_PROMPT = (
    "You are an expert social media content analyst and strategist. "
    "Provide detailed, actionable insights for content optimization."
)


def load_prompt_template(path: Path | None = None) -> str:
    """Load the enrichment prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled enrichment_prompt.txt.

    Returns:
        The raw template string with placeholders.

    Raises:
        EnrichmentConfigurationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "enrichment_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EnrichmentConfigurationError(f"Failed to load prompt template: {exc}") from exc


def load_response_shape(path: Path | None = None) -> str:
    """Load the JSON description of the expected reply."""
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "enrichment_shape.json"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise EnrichmentConfigurationError(f"Failed to load response shape: {exc}") from exc
