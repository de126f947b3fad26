"""
Installing a source-built Tailwind binary.

Runs the pipeline, copies the artifact to `_build/tailwind-<target>` (or an
explicit destination) and disposes of the working directory afterwards.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.filesystem import copy_executable
from .pipeline import PipelineCoordinator, cleanup

logger = logging.getLogger(__name__)

DEFAULT_BUILD_DIR = "_build"


def install_path(target: str, build_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Path where the built binary for a target is installed.

    Args:
        target: Platform identifier
        build_dir: Build directory (default: ./_build)

    Returns:
        Absolute path, e.g. /project/_build/tailwind-freebsd-arm64
    """
    base = Path(build_dir) if build_dir is not None else Path(DEFAULT_BUILD_DIR)
    return (base / f"tailwind-{target}").absolute()


def install_artifact(
    artifact: Union[str, Path], destination: Union[str, Path]
) -> Path:
    """
    Copy a built binary into place and make it executable.

    Raises:
        FilesystemError: If the copy fails
    """
    installed = copy_executable(artifact, destination)
    logger.info(f"Installed Tailwind binary to {installed}")
    return installed


def build_and_install(
    target: str,
    version: str,
    coordinator: Optional[PipelineCoordinator] = None,
    destination: Optional[Union[str, Path]] = None,
    keep_source: bool = False,
) -> Path:
    """
    Build Tailwind from source and install the binary.

    Args:
        target: Platform identifier
        version: Tailwind version
        coordinator: Pipeline to use (default: PipelineCoordinator())
        destination: Install path (default: install_path(target))
        keep_source: Keep the working directory instead of removing it

    Returns:
        Installed binary path

    Raises:
        SourceBuildError: If any pipeline stage fails (working directory kept)
        FilesystemError: If the binary can't be copied
    """
    coordinator = coordinator or PipelineCoordinator()
    destination = Path(destination) if destination else install_path(target)

    result = coordinator.build(target, version)
    if not result.success:
        result.raise_error()

    try:
        installed = install_artifact(result.artifact_path, destination)
    finally:
        if keep_source:
            logger.info(f"Keeping source directory: {result.working_directory}")
        else:
            cleanup(result.working_directory)

    return installed


__all__ = [
    "DEFAULT_BUILD_DIR",
    "install_path",
    "install_artifact",
    "build_and_install",
]
