"""
External process execution for TailwindKit.

Every external tool (cargo, git) is invoked through run_command(), which
returns a ProcessResult instead of raising. Callers decide which stage error
a failed result maps to.

Usage:
    from tailwindkit.core.process import run_command

    result = run_command(["cargo", "--version"])
    if result.ok:
        print(result.output.strip())
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """
    Outcome of an external command.

    Attributes:
        args: Command line that was run
        returncode: Exit status, or None if the process could not be spawned
            or was killed after a timeout
        output: Combined stdout and stderr text, decoded as UTF-8 with
            undecodable bytes replaced (or the spawn error message)
        timed_out: True if the command exceeded its timeout
    """

    args: List[str]
    returncode: Optional[int]
    output: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        """True if the command ran and exited with status 0."""
        return self.returncode == 0

    def __str__(self) -> str:
        status = "timeout" if self.timed_out else self.returncode
        return f"{' '.join(self.args)} -> {status}"


def run_command(
    args: Sequence[Union[str, Path]],
    cwd: Optional[Union[str, Path]] = None,
    timeout: Optional[float] = None,
) -> ProcessResult:
    """
    Run an external command and capture its combined output.

    The working directory override applies to the child process only; the
    current process never changes directory.

    Args:
        args: Command and arguments
        cwd: Working directory for the child process
        timeout: Seconds to wait before killing the command (None waits forever)

    Returns:
        ProcessResult describing the outcome
    """
    cmd = [str(a) for a in args]
    logger.debug(f"Running: {' '.join(cmd)}" + (f" (cwd={cwd})" if cwd else ""))

    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        output = e.output or ""
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        logger.debug(f"Command timed out after {timeout}s: {cmd[0]}")
        return ProcessResult(
            args=cmd,
            returncode=None,
            output=output + f"\nCommand timed out after {timeout}s",
            timed_out=True,
        )
    except OSError as e:
        logger.debug(f"Could not start {cmd[0]}: {e}")
        return ProcessResult(args=cmd, returncode=None, output=str(e))

    logger.debug(f"{cmd[0]} exited with {completed.returncode}")
    return ProcessResult(
        args=cmd, returncode=completed.returncode, output=completed.stdout or ""
    )


__all__ = ["ProcessResult", "run_command"]
