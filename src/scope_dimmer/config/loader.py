"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import yaml

from .schema import DimmerConfig

# ${NAME} or ${NAME:-default}
_ENV_REFERENCE = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    ``${VAR_NAME:-fallback}`` uses ``fallback`` when the variable is unset.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ValueError: If a referenced environment variable without a fallback is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name, fallback = match.group(1), match.group(2)
        value = os.environ.get(var_name, fallback)
        if value is None:
            raise ValueError(f"Environment variable {var_name} not found")
        return value

    return _ENV_REFERENCE.sub(replacer, text)


def load_config(path: Path | str | None = None) -> DimmerConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Without a path, settings come from ``DIMMER_`` environment variables and
    defaults only. An empty file yields the default configuration.

    Args:
        path: Path to YAML configuration file, or None

    Returns:
        Validated DimmerConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If environment variables are missing or the file is not a mapping
        ValidationError: If config doesn't match schema
    """
    if path is None:
        return DimmerConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    yaml_with_env = substitute_env_vars(path.read_text())

    config_dict = yaml.safe_load(yaml_with_env) or {}
    if not isinstance(config_dict, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

    return DimmerConfig.model_validate(config_dict)
