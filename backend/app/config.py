from pathlib import Path

from pydantic_settings import BaseSettings

import alarm_reports

# Sample data ships as package data of alarm_reports
DATA_DIR = Path(alarm_reports.__file__).resolve().parent / "data"


class Settings(BaseSettings):
    # Source data (loaded once at startup)
    ALARMS_FILE: Path = DATA_DIR / "alarms.json"
    ALARM_LOG_FILE: Path = DATA_DIR / "alarmlog.json"

    # App
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
