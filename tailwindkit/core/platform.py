"""
Platform detection for TailwindKit.

Detects the host operating system and CPU architecture and produces the
target string used to name installed binaries (e.g. 'linux-x64',
'freebsd-arm64'). Source builds exist for platforms without upstream
prebuilt binaries, so unknown systems are reported as-is rather than rejected.

Usage:
    from tailwindkit.core.platform import detect_platform

    platform_info = detect_platform()
    print(platform_info.platform_string())
    if platform_info.is_windows:
        ...
"""

import functools
import platform
from dataclasses import dataclass


@dataclass
class PlatformInfo:
    """
    Host platform information.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos', 'freebsd', 'openbsd', 'netbsd', ...)
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm', ...)
    """

    os: str
    arch: str

    @property
    def is_windows(self) -> bool:
        """True on the Windows OS family."""
        return self.os == "windows"

    def platform_string(self) -> str:
        """
        Get canonical platform string.

        Example:
            >>> PlatformInfo('freebsd', 'arm64').platform_string()
            'freebsd-arm64'
        """
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        return self.platform_string()


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.
    """
    return PlatformInfo(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Normalized OS name
    """
    system = platform.system().lower()

    if system == "windows" or system.startswith(("cygwin", "msys", "mingw")):
        return "windows"
    elif system == "darwin":
        return "macos"
    elif system.startswith("freebsd"):
        return "freebsd"
    return system or "unknown"


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm', or the raw machine name
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    else:
        return machine or "unknown"


def clear_platform_cache():
    """
    Clear the platform detection cache.

    Useful for testing or when platform information changes.
    """
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
]
