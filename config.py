"""
Configuration settings for Story Card Smart Sizing
"""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Project paths
    PROJECT_ROOT: Path = Path(__file__).parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Story canvas (9:16 story frame)
    CANVAS_WIDTH: int = 1080
    CANVAS_HEIGHT: int = 1920  # Used as both content and available height when no metrics are measured

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app.log"
    LOG_ROTATION: str = "500 MB"
    LOG_RETENTION: str = "10 days"
    SMART_SIZING_LOG_DECISIONS: bool = False  # Debug-log density/pressure/scales on every computation

    # FastAPI settings
    API_TITLE: str = "Story Card Smart Sizing API"
    API_VERSION: str = "1.0.0"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
