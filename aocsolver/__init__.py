"""Advent of Code puzzle solutions, grid and timing helpers, and a command-line runner."""

__version__ = "0.1.0"