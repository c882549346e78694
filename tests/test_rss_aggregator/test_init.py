"""Test module for rss_aggregator package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import rss_aggregator

    # Assert
    assert rss_aggregator is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import rss_aggregator

    # Assert
    assert isinstance(rss_aggregator.__version__, str)
    assert rss_aggregator.__version__ == "0.1.0"


def test_package_exports_renderers() -> None:
    """Test that the renderers are reachable from the package root."""
    import rss_aggregator

    for name in ("find_child_tag", "render_item_row", "render_feed_page", "render_index_page"):
        assert name in rss_aggregator.__all__
        assert callable(getattr(rss_aggregator, name))
