"""
Source build pipeline for Tailwind CSS.

Sequences toolchain probe, source fetch, release build and artifact lookup.
The first failing stage stops the pipeline and is reported as a
BuildFailure; nothing is retried and nothing is cleaned up automatically.
On success the working directory is handed to the caller, who must call
cleanup() once the binary has been copied somewhere permanent.

Usage:
    from tailwindkit.source.pipeline import PipelineCoordinator, cleanup

    result = PipelineCoordinator().build("freebsd-arm64", "4.1.12")
    if result.success:
        shutil.copy2(result.artifact_path, destination)
        cleanup(result.working_directory)
    else:
        print(f"{result.stage}: {result.reason}")
"""

import logging
from contextlib import nullcontext
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..core.exceptions import (
    ArtifactNotFoundError,
    FilesystemError,
    SourceBuildError,
    Stage,
)
from ..core.filesystem import safe_rmtree
from ..core.locking import LockManager
from .compiler import Compiler
from .fetcher import SourceFetcher
from .locator import ArtifactLocator
from .probe import ToolchainProbe

logger = logging.getLogger(__name__)


@dataclass
class BuildSuccess:
    """
    Successful source build.

    Attributes:
        artifact_path: Built Tailwind binary
        working_directory: Checkout holding the binary; still exists and must
            be passed to cleanup() by the caller
    """

    artifact_path: Path
    working_directory: Path

    @property
    def success(self) -> bool:
        return True


@dataclass
class BuildFailure:
    """
    Failed source build.

    Attributes:
        stage: Stage that failed
        reason: Failure message including tool output
        error: The underlying stage error
    """

    stage: Stage
    reason: str
    error: SourceBuildError

    @property
    def success(self) -> bool:
        return False

    def raise_error(self):
        """Re-raise the underlying stage error."""
        raise self.error

    def __str__(self) -> str:
        return f"{self.stage}: {self.reason}"


BuildResult = Union[BuildSuccess, BuildFailure]


class PipelineCoordinator:
    """
    Runs the source build stages in order.

    Attributes:
        probe: Toolchain probe
        fetcher: Source fetcher
        compiler: Release compiler
        locator: Artifact locator
        lock_manager: If set, each build holds a per-version file lock
    """

    def __init__(
        self,
        probe: Optional[ToolchainProbe] = None,
        fetcher: Optional[SourceFetcher] = None,
        compiler: Optional[Compiler] = None,
        locator: Optional[ArtifactLocator] = None,
        lock_manager: Optional[LockManager] = None,
        lock_timeout: float = -1,
    ):
        self.probe = probe or ToolchainProbe()
        self.fetcher = fetcher or SourceFetcher()
        self.compiler = compiler or Compiler()
        self.locator = locator or ArtifactLocator()
        self.lock_manager = lock_manager
        self.lock_timeout = lock_timeout

    def build(self, target: str, version: str) -> BuildResult:
        """
        Build Tailwind CSS from source.

        Args:
            target: Platform identifier, e.g. 'freebsd-arm64'
            version: Tailwind version, e.g. '4.1.12'

        Returns:
            BuildSuccess with the artifact and working directory, or
            BuildFailure naming the stage that failed
        """
        logger.info(f"Building Tailwind CSS {version} from source for target: {target}")

        if self.lock_manager is not None:
            lock = self.lock_manager.source_lock(version, timeout=self.lock_timeout)
        else:
            lock = nullcontext()

        try:
            with lock:
                artifact_path, working_directory = self._run_stages(target, version)
        except SourceBuildError as e:
            logger.error(f"Failed to build Tailwind from source: {e.reason}")
            return BuildFailure(stage=e.stage, reason=e.reason, error=e)

        logger.info(f"Successfully built Tailwind binary: {artifact_path}")
        return BuildSuccess(
            artifact_path=artifact_path, working_directory=working_directory
        )

    def _run_stages(self, target: str, version: str):
        self.probe.check()
        working_directory = self.fetcher.fetch(version)
        self.compiler.compile(working_directory, target)

        artifact_path = self.locator.locate(working_directory, target)
        if artifact_path is None:
            raise ArtifactNotFoundError(self.locator.output_directory(working_directory))

        return artifact_path, working_directory


def cleanup(working_directory: Union[str, Path]) -> None:
    """
    Remove a working directory.

    Missing directories are ignored and removal problems are only logged.

    Args:
        working_directory: Directory returned in BuildSuccess
    """
    logger.info(f"Cleaning up source directory: {working_directory}")
    try:
        safe_rmtree(working_directory)
    except (FilesystemError, OSError) as e:
        logger.warning(f"Could not remove {working_directory}: {e}")


__all__ = [
    "BuildSuccess",
    "BuildFailure",
    "BuildResult",
    "PipelineCoordinator",
    "cleanup",
]
