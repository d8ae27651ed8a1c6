
"""
CLI package for secret_santa.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from secret_santa.cli.app import app, main

__all__ = [
    "app",
    "main",
]
