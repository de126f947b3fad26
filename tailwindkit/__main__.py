"""
Entry point for running TailwindKit as a module.

Usage: python -m tailwindkit [command] [options]
"""

from tailwindkit.cli.parser import main

if __name__ == "__main__":
    main()
