"""
Tailwind CSS source checkout.

Clones a single tagged release of the upstream repository into a disposable
working directory under the temp root. Any directory already at that path is
removed first: partial state from a previous run is never reused.
"""

import logging
import os
import re
import secrets
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..core.exceptions import CloneFailedError, FilesystemError
from ..core.filesystem import get_temp_root, safe_rmtree
from ..core.process import ProcessResult, run_command

logger = logging.getLogger(__name__)

TAILWIND_REPOSITORY = "https://github.com/tailwindlabs/tailwindcss.git"
WORKDIR_PREFIX = "tailwind-source-"
ISOLATION_SUFFIX = re.compile(r"\d+-[0-9a-f]{8}")


def source_ref(version: str) -> str:
    """Git tag for a Tailwind release (e.g. '4.1.12' -> 'v4.1.12')."""
    return f"v{version}"


class SourceFetcher:
    """
    Fetches a pinned Tailwind CSS release into a working directory.

    Attributes:
        repository: Git URL to clone from
        temp_root: Directory under which working directories are created
        isolate: Add a per-invocation suffix to the working directory name
    """

    def __init__(
        self,
        repository: str = TAILWIND_REPOSITORY,
        temp_root: Optional[Union[str, Path]] = None,
        isolate: bool = False,
        git: str = "git",
        runner: Optional[Callable[..., ProcessResult]] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            repository: Git URL of the Tailwind CSS repository
            temp_root: Parent for working directories (default: system temp dir)
            isolate: Make working directories unique per invocation, so
                concurrent builds of one version do not share a tree
            git: Git executable
            runner: Process runner (defaults to run_command)
            timeout: Clone timeout in seconds (None waits forever)
        """
        self.repository = repository
        self.temp_root = Path(temp_root) if temp_root else get_temp_root()
        self.isolate = isolate
        self.git = git
        self.timeout = timeout
        self._run = runner or run_command

    def working_directory(self, version: str, suffix: Optional[str] = None) -> Path:
        """
        Compute the working directory for a version.

        Args:
            version: Tailwind version
            suffix: Optional disambiguating suffix

        Returns:
            Path under temp_root
        """
        name = f"{WORKDIR_PREFIX}{version}"
        if suffix:
            name += f"-{suffix}"
        return self.temp_root / name

    def existing_directories(self, version: str) -> List[Path]:
        """
        Working directories for a version currently on disk.

        Includes isolated directories (<pid>-<hex> suffix) from earlier runs.
        """
        base = self.working_directory(version)
        found = [base] if base.is_dir() else []
        for path in sorted(self.temp_root.glob(f"{base.name}-*")):
            suffix = path.name[len(base.name) + 1 :]
            if path.is_dir() and ISOLATION_SUFFIX.fullmatch(suffix):
                found.append(path)
        return found

    def fetch(self, version: str) -> Path:
        """
        Clone the given Tailwind release.

        Args:
            version: Tailwind version (cloned from tag v<version>)

        Returns:
            Working directory containing the checkout

        Raises:
            CloneFailedError: If the stale directory can't be removed or git fails
        """
        suffix = f"{os.getpid()}-{secrets.token_hex(4)}" if self.isolate else None
        workdir = self.working_directory(version, suffix)

        logger.info(f"Cloning Tailwind CSS {version} to {workdir}")

        try:
            safe_rmtree(workdir, require_prefix=self.temp_root)
        except (FilesystemError, ValueError) as e:
            raise CloneFailedError(f"could not clear {workdir}: {e}") from e

        self.temp_root.mkdir(parents=True, exist_ok=True)

        result = self._run(
            [
                self.git,
                "clone",
                "--depth",
                "1",
                "--branch",
                source_ref(version),
                self.repository,
                str(workdir),
            ],
            timeout=self.timeout,
        )

        if not result.ok:
            logger.error(f"Failed to clone Tailwind source: {result.output.strip()}")
            raise CloneFailedError(result.output)

        logger.info("Successfully cloned Tailwind source")
        return workdir


__all__ = [
    "SourceFetcher",
    "TAILWIND_REPOSITORY",
    "WORKDIR_PREFIX",
    "source_ref",
]
