"""Command line interface for package protections."""

from .main import main

__all__ = ["main"]
