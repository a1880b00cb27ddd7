from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "refinder"
    db_username: str = "refinder"
    db_password: str = "secret"

    store_backend: str = "postgres"
    channel_backend: str = "postgres"
    poll_interval_seconds: int = 1

    max_results_limit: int = 500

    pdf_engine: str = "pdfplumber"
    document_timeout_seconds: int = 30
    document_user_agent: str = "refinder/0.1"
    document_local_root: Path | None = None
