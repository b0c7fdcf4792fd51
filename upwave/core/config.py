# upwave/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "upwave"
    env: str = "local"

    # S3-compatible object store
    S3_BUCKET: str = "uploads"
    S3_KEY: str | None = None      # falls back to boto3's credential chain
    S3_SECRET: str | None = None
    S3_REGION: str = "us-east-1"
    S3_ENDPOINT_URL: str | None = None   # MinIO / R2 / other S3-compatible stores
    S3_ACL: str = "public-read"

    # =========================
    # Upload rules
    # =========================
    UPLOAD_FIELD_NAME: str = "File"
    UPLOAD_ALLOWED_TYPES: str = ""   # comma separated, empty = any type
    UPLOAD_MAX_BYTES: int | None = None

    CORS_ALLOW_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()


def split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]
