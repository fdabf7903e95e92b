# dentalclinic/core/config.py
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore")

    APP_NAME: str = "Dental Clinic Records"

    # one text file per entity kind lives here
    DATA_DIR: Path = Path("data")
    DATA_FILE_SUFFIX: str = ".txt"

    POPULAR_SERVICES_LIMIT: int = Field(5, ge=1)
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

settings = Settings()
