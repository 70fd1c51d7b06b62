"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Record store (single JSON file, rewritten on every mutation)
    data_file: str = "data/apphub.json"

    # Uploaded attachments and logos
    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024
    allowed_upload_extensions: list[str] = [
        ".doc", ".docx", ".pdf", ".txt", ".rtf",
        ".png", ".jpg", ".jpeg", ".gif", ".svg",
    ]

    # CORS
    cors_allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "info"
    json_logs: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "APPHUB_",
    }


settings = Settings()
