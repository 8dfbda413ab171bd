from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # App
    ENV: str = "development"
    PORT: int = 8000

    # Billed store (REST backend holding bills and uploaded proofs)
    STORE_API_URL: str = "http://localhost:5678"
    STORE_API_TOKEN: Optional[str] = None
    STORE_TIMEOUT: int = 10  # Timeout w sekundach

    # Frontend
    WEB_APP_URL: str = "http://localhost:8080"

    model_config = {
        "env_file": ".env",
        "extra": "ignore"
    }

settings = Settings()
