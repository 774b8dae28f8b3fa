import os
from typing import List

from dotenv import load_dotenv

# Load environment variables only for local development
if os.path.exists(".env"):
    load_dotenv()


class Settings:
    """Runtime configuration read from the environment."""

    def __init__(self):
        self.app_name = os.getenv("APP_NAME", "String Analyzer Service")
        self.app_version = os.getenv("APP_VERSION", "1.0.0")

        # In-memory SQLite by default; records live as long as the process
        self.database_url = os.getenv("DATABASE_URL", "sqlite://")

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins = self._split(os.getenv("CORS_ORIGINS", "*"))

        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", 8000))

    @staticmethod
    def _split(raw: str) -> List[str]:
        return [item.strip() for item in raw.split(",") if item.strip()]


settings = Settings()
