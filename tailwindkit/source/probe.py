"""
Rust toolchain detection for source builds.

Tailwind CSS's standalone binary is built with cargo, so a source build can
only start once cargo is on PATH and answers `cargo --version`.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from ..core.exceptions import ToolchainBrokenError, ToolchainMissingError
from ..core.filesystem import find_executable
from ..core.process import ProcessResult, run_command

logger = logging.getLogger(__name__)

DEFAULT_TOOLCHAIN_COMMAND = "cargo"


class ToolchainProbe:
    """
    Verifies that the Rust toolchain is installed and functional.

    Example:
        >>> probe = ToolchainProbe()
        >>> probe.check()
        'cargo 1.80.0 (376290515 2024-07-16)'
    """

    def __init__(
        self,
        command: str = DEFAULT_TOOLCHAIN_COMMAND,
        runner: Optional[Callable[..., ProcessResult]] = None,
        which: Optional[Callable[[str], Optional[Path]]] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the probe.

        Args:
            command: Toolchain launcher to look for
            runner: Process runner (defaults to run_command)
            which: Executable lookup (defaults to find_executable)
            timeout: Timeout for the version query in seconds
        """
        self.command = command
        self.timeout = timeout
        self._run = runner or run_command
        self._which = which or find_executable

    def check(self) -> str:
        """
        Check that the toolchain is available.

        Returns:
            Version line reported by the toolchain

        Raises:
            ToolchainMissingError: If the launcher is not on PATH
            ToolchainBrokenError: If the version query fails
        """
        launcher = self._which(self.command)
        if launcher is None:
            raise ToolchainMissingError(self.command)

        logger.debug(f"Found {self.command} at {launcher}")

        result = self._run([str(launcher), "--version"], timeout=self.timeout)
        if not result.ok:
            raise ToolchainBrokenError(self.command, result.output)

        version = result.output.strip()
        logger.info(f"Found Rust: {version}")
        return version


__all__ = ["ToolchainProbe", "DEFAULT_TOOLCHAIN_COMMAND"]
