"""
Run command implementation.

Runs the installed Tailwind CSS binary with the arguments and working
directory of a configured profile.
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from tailwindkit.cli.utils import load_project_config, print_error
from tailwindkit.config.parser import ProfileConfig
from tailwindkit.core.exceptions import ConfigError
from tailwindkit.core.platform import detect_platform
from tailwindkit.source.installer import DEFAULT_BUILD_DIR, install_path

logger = logging.getLogger(__name__)


def profile_command(binary: Path, profile: ProfileConfig, extra_args: List[str]) -> List[str]:
    """Command line for a profile: its args followed by any extra args."""
    return [str(binary)] + list(profile.args) + list(extra_args)


def profile_cwd(project_root: Path, profile: ProfileConfig) -> Path:
    """Working directory for a profile, relative paths taken from the project root."""
    if profile.cd is None:
        return Path(project_root)
    return Path(project_root) / profile.cd


def run(args) -> int:
    """
    Run the run command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code of the Tailwind binary, or 1 if it could not be started
    """
    try:
        config = load_project_config(args)
    except ConfigError as e:
        print_error(str(e))
        return 1

    if config is None:
        print_error("No tailwindkit.yaml found; profiles are defined there")
        return 1

    profile = config.profiles.get(args.profile)
    if profile is None:
        known = ", ".join(sorted(config.profiles)) or "none"
        print_error(f"Unknown profile '{args.profile}' (configured: {known})")
        return 1

    project_root = Path(args.project_root)
    if args.binary:
        binary = Path(args.binary)
    else:
        target = args.target or config.target or detect_platform().platform_string()
        build_dir = config.install_dir or DEFAULT_BUILD_DIR
        binary = install_path(target, project_root / build_dir)

    if not binary.is_file():
        print_error(f"Tailwind binary not found at {binary}; run 'tailwindkit build' first")
        return 1

    extra_args = list(args.extra_args or [])
    if extra_args and extra_args[0] == "--":
        extra_args = extra_args[1:]

    cmd = profile_command(binary, profile, extra_args)
    cwd = profile_cwd(project_root, profile)

    try:
        logger.debug(f"Running profile {profile.name}: {cmd} (cwd={cwd})")
        result = subprocess.run(cmd, cwd=str(cwd), check=False)
    except OSError as e:
        logger.error(f"Could not run {binary}: {e}")
        print_error(f"Could not run {binary}: {e}")
        return 1

    return result.returncode
