"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.scope import DimmingReason


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("scope-dimmer.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v


class DimmerConfig(BaseSettings):
    """Root configuration for scope dimming."""

    dimming_reason: DimmingReason = DimmingReason.INDENT_AND_BRACKETS
    tab_width: int = Field(4, ge=1, le=32, description="Fallback until the host reports one")
    enabled: bool = True
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="DIMMER_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )
