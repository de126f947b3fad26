"""YAML configuration parser for TailwindKit.

This module provides parsing and validation for tailwindkit.yaml configuration files.

Example tailwindkit.yaml:

    version: "4.1.12"
    build_from_source: true
    target: freebsd-arm64
    source:
      isolate: false
      lock: true
    profiles:
      default:
        args: [--input=css/app.css, --output=../priv/static/assets/app.css]
        cd: assets
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from packaging.version import InvalidVersion, Version

from ..core.exceptions import ConfigError
from ..source.fetcher import TAILWIND_REPOSITORY
from ..source.probe import DEFAULT_TOOLCHAIN_COMMAND

DEFAULT_CONFIG_FILE = "tailwindkit.yaml"


@dataclass
class SourceBuildConfig:
    """Options for building Tailwind from source."""

    repository: str = TAILWIND_REPOSITORY
    toolchain: str = DEFAULT_TOOLCHAIN_COMMAND
    temp_root: Optional[str] = None  # default: system temp dir
    isolate: bool = False  # unique working directory per build
    lock: bool = True  # serialize builds of the same version
    timeout: Optional[float] = None  # seconds per external command


@dataclass
class ProfileConfig:
    """A named Tailwind invocation (arguments and working directory)."""

    name: str
    args: List[str] = field(default_factory=list)
    cd: Optional[str] = None


@dataclass
class TailwindKitConfig:
    """Complete TailwindKit configuration."""

    version: str
    build_from_source: bool = False
    target: Optional[str] = None  # default: host platform string
    install_dir: Optional[str] = None  # default: ./_build
    source: SourceBuildConfig = field(default_factory=SourceBuildConfig)
    profiles: Dict[str, ProfileConfig] = field(default_factory=dict)


def parse_config(config_path: Path) -> TailwindKitConfig:
    """
    Parse tailwindkit.yaml configuration file.

    Args:
        config_path: Path to tailwindkit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    return parse_config_data(data)


def parse_config_data(data: dict) -> TailwindKitConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    if "version" not in data or data["version"] is None:
        raise ConfigError("Missing required field: version")

    if not isinstance(data["version"], str):
        # YAML reads 4.10 as the float 4.1
        raise ConfigError("version must be a string (quote it in YAML)")

    version = validate_version(data["version"])

    build_from_source = data.get("build_from_source", False)
    if not isinstance(build_from_source, bool):
        raise ConfigError("build_from_source must be true or false")

    target = data.get("target")
    if target is not None and not isinstance(target, str):
        raise ConfigError("target must be a string")

    install_dir = data.get("install_dir")
    if install_dir is not None and not isinstance(install_dir, str):
        raise ConfigError("install_dir must be a string")

    return TailwindKitConfig(
        version=version,
        build_from_source=build_from_source,
        target=target,
        install_dir=install_dir,
        source=_parse_source_config(data.get("source") or {}),
        profiles=_parse_profiles(data.get("profiles") or {}),
    )


def validate_version(version: str) -> str:
    """
    Check that a Tailwind version string parses.

    A leading 'v' is stripped, since the tag prefix is added when fetching.

    Raises:
        ConfigError: If the version is not a valid version number
    """
    version = version.strip()
    if version.startswith("v"):
        version = version[1:]

    try:
        Version(version)
    except InvalidVersion:
        raise ConfigError(f"Invalid Tailwind version: {version!r}")

    return version


def _parse_source_config(data: dict) -> SourceBuildConfig:
    """Parse the source: section."""
    if not isinstance(data, dict):
        raise ConfigError("source must be a dictionary")

    config = SourceBuildConfig(
        repository=data.get("repository", TAILWIND_REPOSITORY),
        toolchain=data.get("toolchain", DEFAULT_TOOLCHAIN_COMMAND),
        temp_root=data.get("temp_root"),
        isolate=data.get("isolate", False),
        lock=data.get("lock", True),
        timeout=data.get("timeout"),
    )

    for name in ("repository", "toolchain"):
        value = getattr(config, name)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"source.{name} must be a non-empty string")

    if config.temp_root is not None and not isinstance(config.temp_root, str):
        raise ConfigError("source.temp_root must be a string")

    for name in ("isolate", "lock"):
        if not isinstance(getattr(config, name), bool):
            raise ConfigError(f"source.{name} must be true or false")

    if config.timeout is not None:
        if isinstance(config.timeout, bool) or not isinstance(
            config.timeout, (int, float)
        ):
            raise ConfigError("source.timeout must be a number of seconds")
        if config.timeout <= 0:
            raise ConfigError("source.timeout must be positive")

    return config


def _parse_profiles(data: dict) -> Dict[str, ProfileConfig]:
    """Parse the profiles: section."""
    if not isinstance(data, dict):
        raise ConfigError("profiles must be a dictionary")

    profiles = {}
    for name, profile_data in data.items():
        profile_data = profile_data or {}
        if not isinstance(profile_data, dict):
            raise ConfigError(f"Profile '{name}' must be a dictionary")

        args = profile_data.get("args", [])
        if isinstance(args, str):
            args = args.split()
        if not isinstance(args, list):
            raise ConfigError(f"profiles.{name}.args must be a list")

        cd = profile_data.get("cd")
        if cd is not None and not isinstance(cd, str):
            raise ConfigError(f"profiles.{name}.cd must be a string")

        profiles[name] = ProfileConfig(name=name, args=[str(a) for a in args], cd=cd)

    return profiles


def find_config_file(project_root: Path) -> Optional[Path]:
    """Return tailwindkit.yaml in project_root if it exists."""
    candidate = Path(project_root) / DEFAULT_CONFIG_FILE
    return candidate if candidate.exists() else None


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
