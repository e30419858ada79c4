# greenroom/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Greenroom Rooms API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Provider whose rooms configuration applies to meeting options
    default_provider: str = os.getenv("DEFAULT_PROVIDER", "greenlight")

    # Attachment storage (avatars, presentations)
    storage_dir: str = os.getenv("STORAGE_DIR", "storage")
    attachments_url_prefix: str = os.getenv("ATTACHMENTS_URL_PREFIX", "/api/v1/attachments")
    max_presentation_bytes: int = int(os.getenv("MAX_PRESENTATION_BYTES", str(30 * 1024 * 1024)))
    presentation_content_types: list[str] = [
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-powerpoint",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.oasis.opendocument.text",
        "application/vnd.oasis.opendocument.presentation",
        "application/vnd.oasis.opendocument.spreadsheet",
        "text/plain",
        "image/png",
        "image/jpeg",
        "image/svg+xml",
    ]

settings = Settings()  # Instantiate configuration
