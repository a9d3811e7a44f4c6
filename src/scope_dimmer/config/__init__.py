"""Configuration loading and validation."""

from .loader import load_config
from .schema import DimmerConfig, FileLoggingConfig, LoggingConfig

__all__ = [
    # Loader
    "load_config",
    # Root config
    "DimmerConfig",
    # Nested configs
    "FileLoggingConfig",
    "LoggingConfig",
]
