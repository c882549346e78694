"""Shared utilities for the RSS aggregator.

This module provides the configuration objects, exception types and logging
helpers used by the tree, render and CLI layers.
"""

from .config import (
    CLIConfig,
    ConfigError,
    MatchPolicy,
    RenderConfig,
)
from .errors import (
    AggregatorError,
    FeedLoadError,
    PreconditionViolation,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "CLIConfig",
    "ConfigError",
    "MatchPolicy",
    "RenderConfig",
    "AggregatorError",
    "FeedLoadError",
    "PreconditionViolation",
    "CorrelationLogger",
    "get_logger",
]
