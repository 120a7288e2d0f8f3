# taskpulse/config/settings.py
# Runtime configuration for the Task Pulse API

import os
import logging
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SECRET_KEY = "your-secret-key"


class Settings:
    """Application settings read from the environment"""

    def __init__(self):
        self.STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json").lower()
        self.DATA_DIR = os.getenv("DATA_DIR", "data")
        self.DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./task_pulse.db")

        self.SECRET_KEY = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
        self.ALGORITHM = os.getenv("ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))
        self.BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

        self.ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@gmail.com")
        self.ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:5173,http://localhost:8080,http://localhost:3000,http://127.0.0.1:5173",
            ).split(",")
            if origin.strip()
        ]

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # File upload settings
        self.FILE_UPLOAD = {
            "upload_dir": os.getenv("UPLOAD_DIR", "uploads"),
            "max_file_size": int(os.getenv("MAX_FILE_SIZE", 10 * 1024 * 1024)),  # 10MB
            "allowed_extensions": {
                # Documents
                ".pdf", ".doc", ".docx", ".txt", ".rtf", ".odt", ".md",
                # Images
                ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp",
                # Spreadsheets
                ".xls", ".xlsx", ".csv", ".ods",
                # Presentations
                ".ppt", ".pptx", ".odp",
                # Archives
                ".zip", ".rar", ".7z", ".tar", ".gz",
                # Media
                ".mp4", ".mov", ".mp3", ".wav",
            },
        }

        if self.SECRET_KEY == DEFAULT_SECRET_KEY:
            logger.warning("SECRET_KEY not set, falling back to the development key")

    @property
    def upload_dir(self) -> str:
        return self.FILE_UPLOAD["upload_dir"]


_settings = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
