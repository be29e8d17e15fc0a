"""Configuration management for the application."""
from typing import List, Optional
from pydantic_settings import BaseSettings

from core.utils.logger import set_log_level


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # API Configuration
    API_TITLE: str = "Portfolio Q&A"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = ["*"]
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    # Answer catalog (defaults to the bundled answers.json)
    CATALOG_PATH: Optional[str] = None
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
set_log_level(settings.LOG_LEVEL)
