"""Advent of Code 2023 puzzle solutions for days 1 to 8, with a command line entry point."""

__version__ = "0.1.0"
__all__ = ["__version__"]