"""Tests for the aggregator exception hierarchy."""

import pytest

from rss_aggregator.shared import AggregatorError, FeedLoadError, PreconditionViolation


class TestErrors:
    """Test exception types and their relationships."""

    def test_precondition_violation_is_value_error(self) -> None:
        """Test PreconditionViolation can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise PreconditionViolation("bad tree")

    def test_precondition_violation_is_aggregator_error(self) -> None:
        """Test PreconditionViolation derives from AggregatorError."""
        assert issubclass(PreconditionViolation, AggregatorError)

    def test_feed_load_error_keeps_source(self) -> None:
        """Test FeedLoadError records the failing source."""
        error = FeedLoadError("cannot read", source="feeds.xml")
        assert error.source == "feeds.xml"
        assert str(error) == "cannot read"
        assert isinstance(error, AggregatorError)
