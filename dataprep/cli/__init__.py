"""Command line entrypoint for the dataprep pipeline."""

from .app import main

__all__ = ["main"]
