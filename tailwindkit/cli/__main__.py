"""
Entry point for running TailwindKit CLI as a module.

Usage: python -m tailwindkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
