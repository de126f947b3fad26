"""
Locating the built Tailwind binary.

Cargo writes release artifacts to `target/release` beneath the checkout.
Which of those entries count as executables depends on the OS family, so the
rule is a strategy chosen once from platform detection and injected into
ArtifactLocator.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..core.platform import PlatformInfo, detect_platform

logger = logging.getLogger(__name__)

RELEASE_OUTPUT_DIR = Path("target") / "release"

PRODUCT_SUBSTRING = "tailwind"

KNOWN_BINARY_NAMES = (
    "tailwindcss",
    "tailwindcss.exe",
    "tailwindcss-oxide",
    "tailwindcss-oxide.exe",
)


class ExecutableRule(ABC):
    """Decides whether a file name looks like an executable."""

    @abstractmethod
    def is_executable(self, filename: str) -> bool:
        """
        Classify a file name.

        Args:
            filename: Bare file name (no directory)

        Returns:
            True if the name is an executable on this OS family
        """
        pass


class WindowsExecutableRule(ExecutableRule):
    """Executables carry the .exe extension."""

    def is_executable(self, filename: str) -> bool:
        return filename.endswith(".exe")


class PosixExecutableRule(ExecutableRule):
    """Executables have no extension, or are one of the known binary names."""

    ALLOWLIST = frozenset({"tailwindcss", "tailwindcss-oxide"})

    def is_executable(self, filename: str) -> bool:
        return "." not in filename or filename in self.ALLOWLIST


def executable_rule_for(platform: Optional[PlatformInfo] = None) -> ExecutableRule:
    """
    Select the executable rule for a platform.

    Args:
        platform: Platform information (auto-detected if None)

    Returns:
        WindowsExecutableRule on Windows, PosixExecutableRule elsewhere
    """
    platform = platform or detect_platform()
    if platform.is_windows:
        return WindowsExecutableRule()
    return PosixExecutableRule()


def is_tailwind_binary(filename: str) -> bool:
    """True if the name is one of the known Tailwind binaries or contains the product name."""
    return filename in KNOWN_BINARY_NAMES or PRODUCT_SUBSTRING in filename


class ArtifactLocator:
    """
    Finds the Tailwind executable in a cargo release output directory.

    When several entries match, exact known binary names win over substring
    matches and ties are broken lexically, so the result does not depend on
    directory listing order.
    """

    def __init__(self, rule: Optional[ExecutableRule] = None):
        """
        Initialize the locator.

        Args:
            rule: Executable classification rule (default: chosen for the host)
        """
        self.rule = rule or executable_rule_for()

    @staticmethod
    def output_directory(working_directory: Union[str, Path]) -> Path:
        """Release output directory beneath a checkout."""
        return Path(working_directory) / RELEASE_OUTPUT_DIR

    def select(self, filenames: Iterable[str]) -> Optional[str]:
        """
        Pick the best matching executable name.

        Args:
            filenames: Candidate file names

        Returns:
            Selected name, or None if nothing matches
        """
        matches: List[str] = [
            name
            for name in filenames
            if self.rule.is_executable(name) and is_tailwind_binary(name)
        ]
        if not matches:
            return None

        return min(matches, key=lambda name: (name not in KNOWN_BINARY_NAMES, name))

    def locate(self, working_directory: Union[str, Path], target: str) -> Optional[Path]:
        """
        Find the built binary.

        Args:
            working_directory: Checkout that was built
            target: Platform identifier (used for logging only)

        Returns:
            Absolute path of the binary, or None if the output directory is
            missing, unreadable, or holds no matching executable
        """
        output_dir = self.output_directory(working_directory).absolute()

        try:
            files = [entry.name for entry in output_dir.iterdir() if entry.is_file()]
        except OSError as e:
            logger.warning(f"Could not list target directory: {output_dir} ({e})")
            return None

        logger.debug(f"Files in target directory: {sorted(files)}")

        binary = self.select(files)
        if binary is None:
            logger.warning(
                f"No executable binary found for target {target} in {output_dir}"
            )
            return None

        logger.debug(f"Found built binary for target {target}: {binary}")
        return output_dir / binary


__all__ = [
    "ArtifactLocator",
    "ExecutableRule",
    "WindowsExecutableRule",
    "PosixExecutableRule",
    "executable_rule_for",
    "is_tailwind_binary",
    "KNOWN_BINARY_NAMES",
    "RELEASE_OUTPUT_DIR",
]
