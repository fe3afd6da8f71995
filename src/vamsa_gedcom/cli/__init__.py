"""
CLI package for vamsa_gedcom.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from vamsa_gedcom.cli.app import app, main

__all__ = [
    "app",
    "main",
]
