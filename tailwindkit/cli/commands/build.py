"""
Build command implementation.

Builds the Tailwind CSS binary from source and installs it for a target.
"""

import logging
from pathlib import Path

from tailwindkit.cli.utils import (
    create_coordinator,
    load_project_config,
    print_error,
    resolve_version,
    safe_print,
)
from tailwindkit.core.exceptions import ConfigError, SourceBuildError
from tailwindkit.core.platform import detect_platform
from tailwindkit.source.installer import DEFAULT_BUILD_DIR, build_and_install, install_path

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the build command.

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

    if config is not None and not config.build_from_source and not args.force:
        print_error(
            "build_from_source is disabled in the configuration; "
            "enable it or pass --force to build anyway"
        )
        return 1

    target = args.target or (config.target if config else None)
    if not target:
        target = detect_platform().platform_string()

    if args.output:
        destination = Path(args.output)
    else:
        build_dir = (config.install_dir if config else None) or DEFAULT_BUILD_DIR
        destination = install_path(target, Path(args.project_root) / build_dir)

    coordinator = create_coordinator(
        config.source if config else None,
        isolate=args.isolate,
        lock=not args.no_lock,
    )

    logger.debug(f"Building {version} for {target}, installing to {destination}")

    try:
        installed = build_and_install(
            target,
            version,
            coordinator=coordinator,
            destination=destination,
            keep_source=args.keep_source,
        )
    except SourceBuildError as e:
        print_error(f"Source build failed while {e.stage.value.replace('_', ' ')}: {e.reason}")
        return 1

    if not args.quiet:
        safe_print(f"✅ Tailwind CSS {version} installed to {installed}")
    return 0
