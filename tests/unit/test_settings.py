import pytest
from pydantic import ValidationError

from medingest.config.settings import Settings


def _settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert _settings().app_env == "dev"

    def test_default_db_port(self) -> None:
        assert _settings().db_port == 5432

    def test_default_pdf_engine(self) -> None:
        assert _settings().pdf_engine == "pdfplumber"

    def test_default_max_file_size_is_ten_mib(self) -> None:
        assert _settings().max_file_size_bytes == 10 * 1024 * 1024

    def test_default_analysis_provider(self) -> None:
        assert _settings().analysis_provider == "gemini"

    def test_default_storage(self) -> None:
        s = _settings()
        assert s.storage_backend == "local"
        assert s.storage_bucket == "medical-documents"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert _settings().log_level == "DEBUG"

    def test_loads_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        assert _settings().db_host == "db.example.com"

    def test_loads_analysis_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_GEMINI_API_KEY", "g-key")
        assert _settings().analysis_gemini_api_key == "g-key"

    def test_loads_storage_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_BACKEND", "s3")
        assert _settings().storage_backend == "s3"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            _settings()

    def test_invalid_max_file_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "ten")
        with pytest.raises(ValidationError):
            _settings()
