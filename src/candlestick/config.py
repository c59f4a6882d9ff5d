"""
Configuration management for the candlestick pattern scanner.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .models.patterns import PatternType


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    file_path: Optional[str] = Field(default=None)
    max_size: str = Field(default="10MB")
    backup_count: int = Field(default=5, ge=1, le=100)
    console_output: bool = Field(default=True)

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class ScannerConfig(BaseModel):
    """Pattern scanning configuration."""

    enabled_patterns: List[PatternType] = Field(default_factory=lambda: list(PatternType))

    @field_validator('enabled_patterns', mode='before')
    @classmethod
    def parse_patterns(cls, v):
        """Accept a comma separated string as well as a list of names."""
        if isinstance(v, str):
            v = [name for name in v.split(",") if name.strip()]
        if not isinstance(v, (list, tuple)):
            return v
        return [name.strip().lower() if isinstance(name, str) else name for name in v]


class Config(BaseModel):
    """Main configuration class."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    scanner: ScannerConfig = Field(default_factory=ScannerConfig)

    @classmethod
    def load_from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Try to load from .env file in current directory
            env_path = Path(".env")
            if env_path.exists():
                load_dotenv(env_path)

        # Logging config
        logging = LoggingConfig(
            level=os.getenv("CANDLESTICK_LOG_LEVEL", "INFO"),
            file_path=os.getenv("CANDLESTICK_LOG_FILE") or None,
            max_size=os.getenv("CANDLESTICK_LOG_MAX_SIZE", "10MB"),
            backup_count=int(os.getenv("CANDLESTICK_LOG_BACKUP_COUNT", "5")),
            console_output=os.getenv("CANDLESTICK_LOG_CONSOLE", "true").lower() == "true"
        )

        # Scanner config
        patterns = os.getenv("CANDLESTICK_ENABLED_PATTERNS")
        scanner = ScannerConfig(enabled_patterns=patterns) if patterns else ScannerConfig()

        return cls(logging=logging, scanner=scanner)
