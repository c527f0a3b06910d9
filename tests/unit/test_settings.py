import pytest
from pydantic import ValidationError

from docextract.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_concurrency_limits(self) -> None:
        s = Settings()
        assert s.max_concurrent_jobs == 4
        assert s.max_pending_jobs == 32

    def test_default_tracker_retention(self) -> None:
        s = Settings()
        assert s.tracker_retention_seconds == 300.0

    def test_default_max_file_size_is_ten_megabytes(self) -> None:
        s = Settings()
        assert s.max_file_size_bytes == 10 * 1024 * 1024


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        s = Settings()
        assert s.db_host == "db.example.com"

    def test_loads_ocr_language(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_LANGUAGE", "deu")
        s = Settings()
        assert s.ocr_language == "deu"

    def test_loads_max_concurrent_jobs(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_CONCURRENT_JOBS", "8")
        s = Settings()
        assert s.max_concurrent_jobs == 8


class TestConninfo:
    def test_builds_libpq_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db")
        monkeypatch.setenv("DB_PORT", "5433")
        monkeypatch.setenv("DB_DATABASE", "docs")
        monkeypatch.setenv("DB_USERNAME", "reader")
        monkeypatch.setenv("DB_PASSWORD", "pw")

        assert Settings().conninfo() == "host=db port=5433 dbname=docs user=reader password=pw"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_retention_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACKER_RETENTION_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()
