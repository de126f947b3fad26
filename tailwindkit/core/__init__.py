"""
Core functionality for TailwindKit.

This package contains the foundational modules the source build pipeline
depends on: errors, process execution, filesystem helpers, platform
detection and locking.
"""

from .exceptions import (
    Stage,
    TailwindKitError,
    SourceBuildError,
    ToolchainError,
    ToolchainMissingError,
    ToolchainBrokenError,
    CloneFailedError,
    CompileFailedError,
    ArtifactNotFoundError,
    FilesystemError,
    ConfigError,
)

from .locking import (
    LockManager,
    LockTimeout,
)

from .platform import (
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
)

from .process import (
    ProcessResult,
    run_command,
)

__all__ = [
    "Stage",
    "TailwindKitError",
    "SourceBuildError",
    "ToolchainError",
    "ToolchainMissingError",
    "ToolchainBrokenError",
    "CloneFailedError",
    "CompileFailedError",
    "ArtifactNotFoundError",
    "FilesystemError",
    "ConfigError",
    "LockManager",
    "LockTimeout",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
    "ProcessResult",
    "run_command",
]
