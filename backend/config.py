# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "Pharmacy POS API"
    DATABASE_URL: str = "sqlite:///./database_pharmacy.db"
    LOG_LEVEL: str = "INFO"

    # Browser POS origin allowed by CORS
    FRONTEND_URL: Optional[str] = None

    # Default look-ahead window for the expiring batches query
    EXPIRY_WINDOW_MONTHS: int = 6

    # Printed on sale receipts
    PHARMACY_NAME: str = "Apotek"
    PHARMACY_ADDRESS: Optional[str] = None
    RECEIPT_DIR: str = "storage/receipts"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
