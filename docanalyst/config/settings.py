from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    uploads_dir: Path = Path("uploads")
    max_file_size_bytes: int = 50 * 1024 * 1024
    max_files_per_batch: int = 10
    allowed_extensions: list[str] = [
        "pdf", "docx", "txt", "csv", "xlsx", "xls", "png", "jpg", "jpeg",
    ]

    pdf_engine: str = "pdfplumber"

    ai_provider: str = "gemini"
    ai_api_key: str = ""
    ai_model_name: str = "gemini-2.5-flash"
    ai_base_url: str = ""
    ai_timeout_seconds: int = 60
    ai_temperature: float = 0.2

    analysis_char_budget: int = 15_000
    chat_excerpt_chars: int = 5_000
