"""
Concurrent access control for TailwindKit.

Source builds use a working directory derived from the Tailwind version, so
two builds of the same version would clobber each other. LockManager hands
out cross-process file locks keyed by version to serialize them.

Usage:
    from tailwindkit.core.locking import LockManager

    lock_manager = LockManager()
    with lock_manager.source_lock("4.1.12", timeout=600):
        # Only one process builds 4.1.12 at a time
        ...
"""

import logging
import platform
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from filelock import FileLock, Timeout as LockTimeout

logger = logging.getLogger(__name__)


def get_global_cache_dir() -> Path:
    """
    Get the global cache directory for lock files.

    Returns:
        Path to global cache directory
    """
    if platform.system() == "Windows":
        return Path.home() / "AppData" / "Local" / "tailwindkit"
    return Path.home() / ".tailwindkit"


class LockManager:
    """
    Manages file locks for TailwindKit resources.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Optional[Path] = None):
        """
        Initialize lock manager.

        Args:
            lock_dir: Directory for lock files (default: global cache/lock/)
        """
        if lock_dir is None:
            lock_dir = get_global_cache_dir() / "lock"

        self.lock_dir = Path(lock_dir)
        self.lock_dir.mkdir(parents=True, exist_ok=True)

    def lock_path(self, version: str) -> Path:
        """Lock file used for builds of the given version."""
        safe_version = version.replace("/", "_").replace("\\", "_")
        return self.lock_dir / f"source-{safe_version}.lock"

    @contextmanager
    def source_lock(self, version: str, timeout: float = -1):
        """
        Acquire the lock for building a Tailwind version from source.

        Args:
            version: Tailwind version being built
            timeout: Maximum wait time in seconds (negative waits forever)

        Yields:
            None

        Raises:
            LockTimeout: If lock can't be acquired within timeout
        """
        lock_path = self.lock_path(version)
        lock = FileLock(lock_path, timeout=timeout)

        try:
            with lock:
                logger.debug(f"Acquired source build lock: {lock_path}")
                yield
                logger.debug(f"Released source build lock: {lock_path}")
        except LockTimeout as e:
            logger.error(
                f"Could not acquire source build lock for {version} after {timeout}s. "
                "Another build of the same version may be running."
            )
            raise LockTimeout(str(lock_path)) from e


__all__ = [
    "LockManager",
    "LockTimeout",
    "get_global_cache_dir",
]
