"""Minimal web message board backed by an append-only text file."""

__version__ = "1.0.0"
