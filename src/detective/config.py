"""Configuration for Detective Quest."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration.

    Only logging is configurable; the mansion and its rules are fixed.
    """

    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("DETECTIVE_LOG_FILE")

        return cls(
            log_level=os.getenv("DETECTIVE_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("DETECTIVE_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
        )
