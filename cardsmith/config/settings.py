# config/settings.py
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # API
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Cardsmith"

    # CORS
    ALLOWED_HOSTS: List[str] = ["http://localhost:3000"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./cardsmith.db"
    SEED_DEFAULT_TEMPLATES: bool = True

    # Auth
    PASSWORD_HASH_ITERATIONS: int = 260_000
    MIN_PASSWORD_LENGTH: int = 8

    # Rendering service
    RENDERING_SERVICE_URL: str = "http://localhost:3002"
    RENDER_TIMEOUT_SECONDS: float = 60
    RENDER_SCALE: float = 3.125  # 300 DPI over a 96 DPI base
    JPEG_QUALITY: int = 95

    # Assets
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    ASSET_FOLDER: str = "cardsmith"

    # Env
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Cloudinary (either use CLOUDINARY_URL or the 3 fields below)
    CLOUDINARY_URL: Optional[str] = None
    CLOUDINARY_CLOUD_NAME: Optional[str] = None
    CLOUDINARY_API_KEY: Optional[str] = None
    CLOUDINARY_API_SECRET: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
