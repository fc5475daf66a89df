import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Package settings loaded from environment variables."""

    def __init__(self):
        # Ordering
        self.ALLOW_MULTIPLE_DEFS = os.getenv("TOPOLOGY_ALLOW_MULTIPLE_DEFS", "false").lower() == "true"

        # Logging
        self.LOG_LEVEL = os.getenv("TOPOLOGY_LOG_LEVEL", "WARNING").upper()
        self.LOG_FILE: Optional[str] = os.getenv("TOPOLOGY_LOG_FILE")
        self.DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL


settings = Settings()
