"""Command-line interface module for the RSS aggregator."""

from .main import main

__all__ = ["main"]
