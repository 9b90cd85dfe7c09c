from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "academic_records"
    db_username: str = "intake"
    db_password: str = ""
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_pool_timeout_seconds: float = 10.0

    pdf_engine: str = "pdfplumber"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_allow_origins: list[str] = ["*"]
