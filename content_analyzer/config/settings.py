from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_upload_bytes: int = 10 * 1024 * 1024

    pdf_engine: str = "heuristic"

    ocr_api_url: str = "https://api.ocr.space/parse/image"
    ocr_api_key: str = "helloworld"
    ocr_language: str = "eng"
    ocr_timeout_seconds: int = 30

    enrichment_provider: str = "openrouter"
    enrichment_base_url: str = ""
    enrichment_api_key: str = ""
    enrichment_api_key_env_var: str = "OPENROUTER_API_KEY"
    enrichment_credential_files: list[str] = [".env.local"]
    enrichment_models: list[str] = ["deepseek/deepseek-r1-0528:free"]
    enrichment_timeout_seconds: int = 60
    enrichment_max_attempts: int = 3
    enrichment_backoff_base_seconds: float = 0.8
    enrichment_temperature: float = 0.7
    enrichment_max_tokens: int = 2000

    site_url: str = "http://localhost:3002"
    app_title: str = "Content Analyzer AI"
