"""
Building Tailwind CSS from source.

Used when no prebuilt binary exists for a platform: checks for cargo, clones
the tagged release, runs a release build and finds the resulting binary.
"""

from .probe import ToolchainProbe
from .fetcher import SourceFetcher, TAILWIND_REPOSITORY
from .compiler import Compiler
from .locator import (
    ArtifactLocator,
    ExecutableRule,
    WindowsExecutableRule,
    PosixExecutableRule,
    executable_rule_for,
)
from .pipeline import (
    BuildSuccess,
    BuildFailure,
    BuildResult,
    PipelineCoordinator,
    cleanup,
)
from .installer import install_path, install_artifact, build_and_install

__all__ = [
    "ToolchainProbe",
    "SourceFetcher",
    "TAILWIND_REPOSITORY",
    "Compiler",
    "ArtifactLocator",
    "ExecutableRule",
    "WindowsExecutableRule",
    "PosixExecutableRule",
    "executable_rule_for",
    "BuildSuccess",
    "BuildFailure",
    "BuildResult",
    "PipelineCoordinator",
    "cleanup",
    "install_path",
    "install_artifact",
    "build_and_install",
]
