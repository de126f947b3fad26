"""
Clean command implementation.

Removes source checkouts kept by `build --keep-source` or left behind by
failed builds.
"""

import logging

from tailwindkit.cli.utils import (
    load_project_config,
    print_error,
    resolve_version,
    safe_print,
)
from tailwindkit.core.exceptions import ConfigError
from tailwindkit.source.fetcher import SourceFetcher
from tailwindkit.source.pipeline import cleanup

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the clean command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    try:
        config = load_project_config(args)
        version = resolve_version(args, config)
    except ConfigError as e:
        print_error(str(e))
        return 1

    temp_root = config.source.temp_root if config else None
    fetcher = SourceFetcher(temp_root=temp_root)

    directories = fetcher.existing_directories(version)
    if not directories:
        if not args.quiet:
            safe_print(f"No source checkouts for Tailwind CSS {version}")
        return 0

    failed = []
    for directory in directories:
        cleanup(directory)
        if directory.exists():
            failed.append(directory)
            print_error(f"Could not remove {directory}")
        elif not args.quiet:
            safe_print(f"Removed {directory}")

    return 1 if failed else 0
