"""
Centralized exception hierarchy for TailwindKit.

Every failure of the source build pipeline is a SourceBuildError carrying the
stage it happened in, so callers can report "stage: reason" without knowing
which component raised it.
"""

from enum import Enum

from filelock import Timeout as LockTimeout


class Stage(Enum):
    """Pipeline stages, in execution order."""

    PROBING_TOOLCHAIN = "probing_toolchain"
    FETCHING = "fetching"
    COMPILING = "compiling"
    LOCATING = "locating"

    def __str__(self) -> str:
        return self.value


# ============================================================================
# Base Exceptions
# ============================================================================


class TailwindKitError(Exception):
    """Base exception for all TailwindKit errors."""

    pass


# ============================================================================
# Source Build Exceptions
# ============================================================================


class SourceBuildError(TailwindKitError):
    """
    Base exception for source build failures.

    Attributes:
        stage: Pipeline stage that failed
        reason: Human readable failure message, usually including tool output
    """

    stage: Stage  # bound by each subclass

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ToolchainError(SourceBuildError):
    """Base exception for Rust toolchain problems."""

    stage = Stage.PROBING_TOOLCHAIN


class ToolchainMissingError(ToolchainError):
    """Raised when the cargo launcher is not on PATH."""

    def __init__(self, command: str = "cargo"):
        self.command = command
        super().__init__(
            f"Rust/Cargo not found ('{command}' is not on PATH). "
            "Please install Rust to build from source."
        )


class ToolchainBrokenError(ToolchainError):
    """Raised when cargo is on PATH but its version query fails."""

    def __init__(self, command: str = "cargo", output: str = ""):
        self.command = command
        self.output = output
        msg = "Rust installation appears to be broken"
        if output:
            msg += f": {output.strip()}"
        super().__init__(msg)


class CloneFailedError(SourceBuildError):
    """Raised when cloning the Tailwind CSS source fails."""

    stage = Stage.FETCHING

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Failed to clone source: {message.strip()}")


class CompileFailedError(SourceBuildError):
    """Raised when `cargo build --release` exits non-zero."""

    stage = Stage.COMPILING

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Build failed: {message.strip()}")


class ArtifactNotFoundError(SourceBuildError):
    """Raised when the build succeeded but no Tailwind executable was found."""

    stage = Stage.LOCATING

    def __init__(self, search_dir=None):
        self.search_dir = search_dir
        msg = "Built binary not found"
        if search_dir is not None:
            msg += f" in {search_dir}"
        super().__init__(msg)


# ============================================================================
# Filesystem and Configuration Exceptions
# ============================================================================


class FilesystemError(TailwindKitError):
    """Base exception for filesystem operations."""

    pass


class ConfigError(TailwindKitError):
    """Configuration parsing or validation error."""

    pass


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
    "LockTimeout",
]
