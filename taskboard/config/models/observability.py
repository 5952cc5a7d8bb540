"""Observability configuration model."""

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ObservabilityConfig(BaseModel):
    """Logging configuration."""

    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="json", description="Log output format"
    )
    redact_sensitive: bool = Field(
        default=True, description="Redact free-text task content from logs"
    )
