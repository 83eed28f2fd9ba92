import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
    ]

    # Simulated latency in seconds
    STORE_LIST_DELAY: float = 0.6
    STORE_GET_DELAY: float = 0.4
    STORE_WRITE_DELAY: float = 0.8
    STORE_STATS_DELAY: float = 0.8
    STORE_SEED: bool = True

    RECENT_REVIEW_WINDOW_DAYS: int = 30
    NOTIFICATION_FEED_SIZE: int = 50

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
