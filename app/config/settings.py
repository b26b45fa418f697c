from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    allowed_origins: str = (
        "http://localhost:3000,http://127.0.0.1:3000,"
        "http://localhost:5500,http://127.0.0.1:5500,"
        "http://localhost:3001,http://localhost:5173"
    )
    max_upload_bytes: int = 5 * 1024 * 1024

    db_host: str = ""
    db_port: int = 5432
    db_database: str = "resumesite"
    db_username: str = "resumesite"
    db_password: str = "secret"
    db_pool_timeout_seconds: float = 5.0

    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_bucket: str = "resume-uploads"
    storage_max_file_bytes: int = 5 * 1024 * 1024

    pdf_engine: str = "pdfplumber"

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.0-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"

    anthropic_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("anthropic_api_key", "llm_api_key"),
    )
    anthropic_model_name: str = "claude-sonnet-4-20250514"
    anthropic_base_url: str = "https://api.anthropic.com/v1/"

    generation_timeout_seconds: int = 120
    generation_max_output_tokens: int = 8192

    @property
    def tracking_enabled(self) -> bool:
        return bool(self.db_host)

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
