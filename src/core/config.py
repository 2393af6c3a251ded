"""Settings, read from environment variables (with defaults for local development)"""

import os

# Spellings the logging module understands, but uvicorn does not
_LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings:
    def __init__(self) -> None:
        self.HOST = os.environ.get("BOWLING_HOST", "0.0.0.0")
        self.PORT = int(os.environ.get("BOWLING_PORT", "8080"))
        level = os.environ.get("BOWLING_LOG_LEVEL", "INFO").upper()
        self.LOG_LEVEL = _LOG_LEVEL_ALIASES.get(level, level)


settings = Settings()
