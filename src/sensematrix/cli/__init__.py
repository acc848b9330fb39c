"""Command-line interface for sensematrix."""

from .main import cli

__all__ = ["cli"]
