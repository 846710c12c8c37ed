"""Solutions to a 2023 season of daily programming puzzles, with a command-line runner."""

__version__ = "1.0.0"