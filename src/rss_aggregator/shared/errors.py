"""Exception types raised by the RSS aggregator."""

from typing import Optional


class AggregatorError(Exception):
    """Base exception for all aggregator failures."""


class PreconditionViolation(AggregatorError, ValueError):
    """Raised when a renderer is handed a tree that breaks its contract.

    Examples are a feed page asked to render a node that is not a
    ``<channel>`` tag, or a channel lacking its ``title`` child. These are
    programming errors: the call is aborted before any output is produced.
    """


class FeedLoadError(AggregatorError):
    """Raised when an XML source cannot be read or parsed into a tree."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source
