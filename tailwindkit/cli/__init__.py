"""
TailwindKit command-line interface.

Usage: tailwindkit [command] [options]
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
