"""Wheels Router MCP - transit trip planning across regional and global providers."""

__version__ = "0.4.0"
