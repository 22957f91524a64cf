"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "virtual-barcode"
    log_level: str = "INFO"

    # Barcode
    due_date_century: int = Field(default=2000, ge=0)  # YY in YYMMDD means century + YY


settings = Settings()
