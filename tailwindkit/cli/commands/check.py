"""
Check command implementation.

Verifies that the Rust toolchain needed for source builds is usable.
"""

import logging

from tailwindkit.cli.utils import load_project_config, safe_print
from tailwindkit.core.exceptions import ConfigError, ToolchainError
from tailwindkit.source.probe import DEFAULT_TOOLCHAIN_COMMAND, ToolchainProbe

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if the toolchain works)
    """
    try:
        config = load_project_config(args)
    except ConfigError as e:
        logger.warning(f"Ignoring configuration: {e}")
        config = None

    command = config.source.toolchain if config else DEFAULT_TOOLCHAIN_COMMAND
    probe = ToolchainProbe(command=command)

    try:
        version = probe.check()
    except ToolchainError as e:
        safe_print(f"❌ {e.reason}")
        return 1

    if not args.quiet:
        safe_print(f"✅ {version}")
    return 0
