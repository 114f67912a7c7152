"""Command line interface for ossrh-release"""

from .main import cli, main

__all__ = ["cli", "main"]
