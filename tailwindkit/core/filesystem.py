"""
File system utilities for TailwindKit.

Thin, platform-aware wrappers used by the source build pipeline:
- Executable lookup on PATH
- Temp root lookup for working directories
- Safe recursive deletion (handles read-only files on Windows, e.g. .git objects)
- Copying a built binary into place as an executable
"""

import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import Optional, Union

from .exceptions import FilesystemError

IS_WINDOWS = os.name == "nt"


def find_executable(name: str) -> Optional[Path]:
    """
    Find an executable on the system PATH.

    Args:
        name: Executable name (e.g., 'cargo', 'git')

    Returns:
        Path to executable if found, None otherwise

    Example:
        >>> find_executable('cargo')
        PosixPath('/home/user/.cargo/bin/cargo')
    """
    found = shutil.which(name)
    return Path(found) if found else None


def get_temp_root() -> Path:
    """Return the system temporary directory."""
    return Path(tempfile.gettempdir())


def is_relative_to(path: Path, parent: Path) -> bool:
    """Check if path is under parent directory."""
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def _handle_remove_readonly(func, path, exc_info):
    """Error handler for read-only files (git pack files on Windows)."""
    if not os.access(path, os.W_OK):
        os.chmod(path, stat.S_IWRITE | stat.S_IREAD)
        func(path)
    else:
        raise exc_info[1]


def safe_rmtree(
    path: Union[str, Path], require_prefix: Optional[Union[str, Path]] = None
) -> None:
    """
    Safely remove a directory tree.

    Missing paths are ignored.

    Args:
        path: Directory to remove
        require_prefix: If specified, path must be under this directory

    Raises:
        ValueError: If path is not under require_prefix
        FilesystemError: If the path is not a directory or deletion fails

    Example:
        >>> safe_rmtree('/tmp/tailwind-source-4.1.12', require_prefix='/tmp')
    """
    path = Path(path).resolve()

    if require_prefix is not None:
        require_prefix = Path(require_prefix).resolve()
        if not is_relative_to(path, require_prefix):
            raise ValueError(
                f"Refusing to delete '{path}': not under required prefix '{require_prefix}'"
            )

    if not path.exists():
        return

    if not path.is_dir():
        raise FilesystemError(f"Path is not a directory: {path}")

    try:
        shutil.rmtree(path, onerror=_handle_remove_readonly)
    except Exception as e:
        raise FilesystemError(f"Failed to remove directory '{path}': {e}") from e


def copy_executable(source: Union[str, Path], destination: Union[str, Path]) -> Path:
    """
    Copy a binary to destination and mark it executable.

    Parent directories are created as needed and an existing file at the
    destination is replaced.

    Args:
        source: Built binary
        destination: Target file path

    Returns:
        Destination path

    Raises:
        FilesystemError: If the copy fails
    """
    source = Path(source)
    destination = Path(destination)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        if not IS_WINDOWS:
            destination.chmod(0o755)
    except OSError as e:
        raise FilesystemError(
            f"Failed to copy '{source}' to '{destination}': {e}"
        ) from e

    return destination


__all__ = [
    "IS_WINDOWS",
    "find_executable",
    "get_temp_root",
    "is_relative_to",
    "safe_rmtree",
    "copy_executable",
]
