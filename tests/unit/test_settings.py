import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_port(self) -> None:
        s = Settings()
        assert s.port == 3000

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_supabase_bucket(self) -> None:
        s = Settings()
        assert s.supabase_bucket == "resume-uploads"

    def test_default_upload_limit_is_five_mebibytes(self) -> None:
        s = Settings()
        assert s.max_upload_bytes == 5 * 1024 * 1024

    def test_tracking_disabled_without_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DB_HOST", raising=False)
        s = Settings()
        assert s.tracking_enabled is False


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_db_host_enables_tracking(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        s = Settings()
        assert s.db_host == "db.example.com"
        assert s.tracking_enabled is True

    def test_strips_whitespace_from_keys(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "  key-123 \n")
        s = Settings()
        assert s.gemini_api_key == "key-123"

    def test_anthropic_key_falls_back_to_llm_api_key(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        monkeypatch.setenv("LLM_API_KEY", "sk-ant")
        s = Settings()
        assert s.anthropic_api_key == "sk-ant"

    def test_cors_origins_split_and_trimmed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example ,")
        s = Settings()
        assert s.cors_origins == ["https://a.example", "https://b.example"]


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_upload_limit_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "abc")
        with pytest.raises(ValidationError):
            Settings()
