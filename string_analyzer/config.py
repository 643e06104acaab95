from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"extra": "ignore", "env_file": ".env", "env_file_encoding": "utf-8"}

    APP_NAME: str = "String Analyzer Service"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging configuration used by string_analyzer.logging
    LOG_LEVEL: str = "INFO"
    CONSOLE_LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]

    # Rate limiting (slowapi, in-memory storage)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT: int = 120
    RATE_LIMIT_WINDOW: int = 60


settings = Settings()
