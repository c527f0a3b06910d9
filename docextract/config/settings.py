from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "docextract"
    db_username: str = "docextract"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    pdf_engine: str = "pdfplumber"
    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    max_concurrent_jobs: int = 4
    max_pending_jobs: int = 32
    tracker_retention_seconds: float = 300.0
    max_file_size_bytes: int = 10 * 1024 * 1024
    progress_poll_interval_seconds: float = 0.5

    def conninfo(self) -> str:
        """libpq connection string for the document store."""
        return (
            f"host={self.db_host} "
            f"port={self.db_port} "
            f"dbname={self.db_database} "
            f"user={self.db_username} "
            f"password={self.db_password}"
        )
