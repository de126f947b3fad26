"""
TailwindKit CLI argument parser.

This module implements the command-line interface for TailwindKit using argparse.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from tailwindkit import __version__

logger = logging.getLogger(__name__)


class CLI:
    """TailwindKit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="tailwindkit",
            description="TailwindKit - build Tailwind CSS from source",
            epilog='Use "tailwindkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"TailwindKit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./tailwindkit.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Project root directory (default: current directory)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_build_command(subparsers)
        self._add_check_command(subparsers)
        self._add_clean_command(subparsers)
        self._add_run_command(subparsers)

        return parser

    def _add_build_command(self, subparsers):
        """Add 'build' subcommand."""
        parser = subparsers.add_parser(
            "build",
            help="Build Tailwind CSS from source",
            description="Clone a Tailwind CSS release, build it with cargo and install the binary",
        )
        parser.add_argument(
            "--target",
            metavar="TARGET",
            help="Target platform name, e.g. freebsd-arm64 (default: host platform)",
        )
        parser.add_argument(
            "--tailwind-version",
            metavar="VERSION",
            help="Tailwind version to build (default: from configuration)",
        )
        parser.add_argument(
            "--output",
            type=Path,
            metavar="PATH",
            help="Install path for the binary (default: _build/tailwind-TARGET)",
        )
        parser.add_argument(
            "--keep-source",
            action="store_true",
            help="Keep the source checkout after installing",
        )
        parser.add_argument(
            "--isolate",
            action="store_true",
            help="Use a unique working directory for this build",
        )
        parser.add_argument(
            "--no-lock",
            action="store_true",
            help="Do not serialize builds of the same version",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Build even if build_from_source is disabled in the configuration",
        )

    def _add_check_command(self, subparsers):
        """Add 'check' subcommand."""
        subparsers.add_parser(
            "check",
            help="Check that the Rust toolchain is available",
            description="Verify that cargo is installed and working",
        )

    def _add_clean_command(self, subparsers):
        """Add 'clean' subcommand."""
        parser = subparsers.add_parser(
            "clean",
            help="Remove source checkouts",
            description="Remove working directories left behind by source builds",
        )
        parser.add_argument(
            "--tailwind-version",
            metavar="VERSION",
            help="Version whose checkouts to remove (default: from configuration)",
        )

    def _add_run_command(self, subparsers):
        """Add 'run' subcommand."""
        parser = subparsers.add_parser(
            "run",
            help="Run the installed Tailwind binary with a profile",
            description="Run the installed binary with a configured profile's args and working directory",
        )
        parser.add_argument(
            "profile",
            nargs="?",
            default="default",
            help="Profile name from tailwindkit.yaml (default: default)",
        )
        parser.add_argument(
            "--target",
            metavar="TARGET",
            help="Target whose installed binary to run (default: configured or host platform)",
        )
        parser.add_argument(
            "--binary",
            type=Path,
            metavar="PATH",
            help="Binary to run instead of the installed one",
        )
        parser.add_argument(
            "extra_args",
            nargs=argparse.REMAINDER,
            help="Extra arguments passed to Tailwind after the profile's args",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "build": "tailwindkit.cli.commands.build",
            "check": "tailwindkit.cli.commands.check",
            "clean": "tailwindkit.cli.commands.clean",
            "run": "tailwindkit.cli.commands.run",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
