"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class NormalizerSettings(BaseModel):
    """Runtime settings for content normalization and display."""

    html_extensions: List[str] = Field(
        default_factory=lambda: [".html", ".htm"],
        description="Source file extensions that trigger the HTML-to-text pre-pass",
    )
    max_strip_passes: int = Field(
        50,
        ge=1,
        le=1000,
        description="Upper bound on repeated title/copyright strip passes per document",
    )
    wrap_width: int = Field(
        80, ge=10, le=1000, description="Default line width for wrapped display output"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @field_validator("html_extensions")
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Lowercase extensions and ensure each starts with a dot."""
        normalized = []
        for ext in v:
            stripped = ext.strip().lower()
            if not stripped:
                continue
            if not stripped.startswith("."):
                stripped = f".{stripped}"
            normalized.append(stripped)
        return normalized

    def is_html_source(self, filename: str) -> bool:
        """Whether a source filename should go through the HTML pre-pass."""
        lowered = filename.lower()
        return any(lowered.endswith(ext) for ext in self.html_extensions)
