"""Configuration for SkillHub."""

from skillhub.config.loader import (
    ConfigurationError,
    clear_config_cache,
    get_config,
    get_config_sources,
    load_config,
    load_yaml_file,
)
from skillhub.config.merger import deep_merge, merge_configs, set_nested_value
from skillhub.config.schema import Config, GeneralConfig, InstallConfig

__all__ = [
    "Config",
    "ConfigurationError",
    "GeneralConfig",
    "InstallConfig",
    "clear_config_cache",
    "deep_merge",
    "get_config",
    "get_config_sources",
    "load_config",
    "load_yaml_file",
    "merge_configs",
    "set_nested_value",
]
