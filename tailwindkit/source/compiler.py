"""
Release build of a Tailwind CSS checkout.

Runs `cargo build --release` inside the working directory. The build always
targets the host; the target string is only carried along for naming and
artifact lookup, cross-compilation is not supported.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..core.exceptions import CompileFailedError
from ..core.process import ProcessResult, run_command
from .probe import DEFAULT_TOOLCHAIN_COMMAND

logger = logging.getLogger(__name__)

RELEASE_BUILD_ARGS = ["build", "--release"]


class Compiler:
    """Invokes the Rust toolchain's release build in a working directory."""

    def __init__(
        self,
        command: str = DEFAULT_TOOLCHAIN_COMMAND,
        runner: Optional[Callable[..., ProcessResult]] = None,
        timeout: Optional[float] = None,
    ):
        self.command = command
        self.timeout = timeout
        self._run = runner or run_command

    def build_command(self) -> List[str]:
        """Command line for the release build."""
        return [self.command, *RELEASE_BUILD_ARGS]

    def compile(self, working_directory: Union[str, Path], target: str) -> None:
        """
        Build the release binary.

        Args:
            working_directory: Checkout to build in
            target: Platform identifier (informational, host build only)

        Raises:
            CompileFailedError: If the build exits non-zero
        """
        logger.info(f"Building Tailwind binary for target: {target}")

        result = self._run(
            self.build_command(), cwd=Path(working_directory), timeout=self.timeout
        )

        if not result.ok:
            logger.error(f"Failed to build Tailwind: {result.output.strip()}")
            raise CompileFailedError(result.output)

        logger.debug(f"Release build finished in {working_directory}")


__all__ = ["Compiler", "RELEASE_BUILD_ARGS"]
