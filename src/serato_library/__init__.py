"""Serato Library - read Serato DJ database and crate files."""

__version__ = "0.1.0"
