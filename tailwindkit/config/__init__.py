"""Configuration loading for TailwindKit."""

from .parser import (
    ConfigError,
    DEFAULT_CONFIG_FILE,
    SourceBuildConfig,
    ProfileConfig,
    TailwindKitConfig,
    parse_config,
    parse_config_data,
    validate_version,
    find_config_file,
)

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_FILE",
    "SourceBuildConfig",
    "ProfileConfig",
    "TailwindKitConfig",
    "parse_config",
    "parse_config_data",
    "validate_version",
    "find_config_file",
]
