"""
Configuration loader for SkillHub.

Loads and merges configuration from multiple sources:
1. Default values
2. Global config (~/.skillhub/config.yaml)
3. Project config (./.skillhub/config.yaml, searched upwards)
4. Environment variables (SKILLHUB_*)
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from skillhub.config.merger import merge_configs, set_nested_value
from skillhub.config.schema import Config
from skillhub.storage.paths import find_project_config, get_global_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "SKILLHUB_"

# Variables that are not configuration keys
RESERVED_ENV_VARS = frozenset({"SKILLHUB_HOME"})


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary (empty if the file does not exist).

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return content


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    SKILLHUB_INSTALL_MODE=copy sets install.mode.

    Args:
        config: Configuration dictionary to modify.

    Returns:
        Configuration with environment overrides applied.
    """
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key in RESERVED_ENV_VARS:
            continue

        config_key = key[len(ENV_PREFIX) :].lower().replace("_", ".")
        config = set_nested_value(config, config_key, _parse_env_value(value))
        logger.debug(f"Config override from {key}: {config_key}")

    return config


def _parse_env_value(value: str) -> Any:
    """
    Parse an environment variable value to the appropriate type.

    Returns:
        Parsed value (bool, int, float, list, or string).
    """
    if value.lower() in ("true", "yes", "1", "on"):
        return True
    if value.lower() in ("false", "no", "0", "off"):
        return False

    if re.match(r"^-?\d+$", value):
        return int(value)

    if re.match(r"^-?\d+\.\d+$", value):
        return float(value)

    if "," in value:
        return [item.strip() for item in value.split(",")]

    return value


def load_config(
    project_path: Path | None = None,
    skip_project: bool = False,
    skip_env: bool = False,
) -> Config:
    """
    Load and merge configuration from all sources.

    Args:
        project_path: Starting path to search for project config. Defaults to cwd.
        skip_project: Skip loading project configuration.
        skip_env: Skip environment variable overrides.

    Returns:
        Merged and validated Config object.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    layers = [Config().model_dump(mode="json"), load_yaml_file(get_global_config_path())]

    if not skip_project:
        project_config_path = find_project_config(project_path)
        if project_config_path:
            layers.append(load_yaml_file(project_config_path))

    config_dict = merge_configs(*layers)

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def get_config_sources(project_path: Path | None = None) -> dict[str, Path | None]:
    """
    Get paths to all configuration sources.

    Returns:
        Dictionary mapping source names to paths (None if not found).
    """
    global_path = get_global_config_path()
    return {
        "global": global_path if global_path.exists() else None,
        "project": find_project_config(project_path),
    }


# Singleton for cached config
_cached_config: Config | None = None


def get_config(reload: bool = False) -> Config:
    """
    Get the global configuration instance.

    Uses a cached instance. Use reload=True to force refresh.
    """
    global _cached_config

    if _cached_config is None or reload:
        _cached_config = load_config()

    return _cached_config


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    global _cached_config
    _cached_config = None
