"""
Shared utilities for CLI commands.

Provides configuration lookup and pipeline construction used by several
commands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from tailwindkit.config.parser import (
    SourceBuildConfig,
    TailwindKitConfig,
    find_config_file,
    parse_config,
    validate_version,
)
from tailwindkit.core.exceptions import ConfigError
from tailwindkit.core.locking import LockManager
from tailwindkit.source.compiler import Compiler
from tailwindkit.source.fetcher import SourceFetcher
from tailwindkit.source.locator import ArtifactLocator
from tailwindkit.source.pipeline import PipelineCoordinator
from tailwindkit.source.probe import ToolchainProbe

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def load_project_config(args) -> Optional[TailwindKitConfig]:
    """
    Load configuration from --config or <project-root>/tailwindkit.yaml.

    Args:
        args: Parsed arguments with config and project_root

    Returns:
        Parsed configuration, or None if no configuration file exists

    Raises:
        ConfigError: If an explicit --config file is missing or any file is invalid
    """
    config_file = getattr(args, "config", None)
    if config_file is None:
        config_file = find_config_file(Path(args.project_root))
        if config_file is None:
            logger.debug("No config file found")
            return None

    logger.debug(f"Loading configuration from {config_file}")
    return parse_config(Path(config_file))


def resolve_version(args, config: Optional[TailwindKitConfig]) -> str:
    """
    Pick the Tailwind version from --tailwind-version or configuration.

    Raises:
        ConfigError: If no version is given or it is invalid
    """
    version = getattr(args, "tailwind_version", None)
    if version:
        return validate_version(version)
    if config is not None:
        return config.version
    raise ConfigError(
        "No Tailwind version given (use --tailwind-version or set version in tailwindkit.yaml)"
    )


# ============================================================================
# Pipeline Construction
# ============================================================================


def create_coordinator(
    source: Optional[SourceBuildConfig] = None,
    isolate: bool = False,
    lock: bool = True,
) -> PipelineCoordinator:
    """
    Build a PipelineCoordinator from source build settings.

    Args:
        source: Source build configuration (defaults if None)
        isolate: Force per-build working directories
        lock: Allow per-version locking (still subject to source.lock)

    Returns:
        Configured PipelineCoordinator
    """
    source = source or SourceBuildConfig()

    return PipelineCoordinator(
        probe=ToolchainProbe(command=source.toolchain, timeout=source.timeout),
        fetcher=SourceFetcher(
            repository=source.repository,
            temp_root=source.temp_root,
            isolate=isolate or source.isolate,
            timeout=source.timeout,
        ),
        compiler=Compiler(command=source.toolchain, timeout=source.timeout),
        locator=ArtifactLocator(),
        lock_manager=LockManager() if (lock and source.lock) else None,
    )


# ============================================================================
# Output
# ============================================================================


def print_error(message: str):
    """Print error message to stderr."""
    print(f"ERROR: {message}", file=sys.stderr)


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to ASCII-safe markers if Unicode symbols can't be encoded.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        safe_message = message.replace("✅", "[OK]").replace("❌", "[ERROR]")
        print(safe_message, file=file)
