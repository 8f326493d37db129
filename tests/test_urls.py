"""Tests for URL resolution."""

from __future__ import annotations

import pytest

from template_shots.config import URL_OVERRIDES
from template_shots.urls import resolve_url


class TestResolveUrl:
    """Test default and overridden entry URLs."""

    def test_default_pattern(self) -> None:
        assert resolve_url("http://x", "05-foo") == "http://x/05-foo/"

    def test_trailing_slash_on_base_is_normalized(self) -> None:
        assert resolve_url("http://x/", "05-foo") == "http://x/05-foo/"

    def test_one_page_override(self) -> None:
        assert (
            resolve_url("http://localhost:8080", "41-metronic-one-page")
            == "http://localhost:8080/41-metronic-one-page/theme/index.html"
        )

    def test_full_url_override_is_returned_as_is(self) -> None:
        overrides = {"07-external": "https://cdn.example.com/demo/index.html"}
        assert (
            resolve_url("http://x", "07-external", overrides)
            == "https://cdn.example.com/demo/index.html"
        )

    def test_custom_table_replaces_default(self) -> None:
        """Test that an explicit table is used instead of URL_OVERRIDES."""
        assert resolve_url("http://x", "41-metronic-one-page", {}) == "http://x/41-metronic-one-page/"

    def test_override_table_has_four_entries(self) -> None:
        assert len(URL_OVERRIDES) == 4


@pytest.mark.parametrize(
    "name,expected",
    [
        ("40-metronic-shop-ui", "http://x/40-metronic-shop-ui/theme/shop-index.html"),
        ("41-metronic-one-page", "http://x/41-metronic-one-page/theme/index.html"),
        ("42-navigator-onepage", "http://x/42-navigator-onepage/index.html"),
        ("43-metronic-one-page", "http://x/43-metronic-one-page/theme/"),
        ("44-anything-else", "http://x/44-anything-else/"),
    ],
)
def test_known_overrides(name, expected):
    """Test every configured override and a plain fallback."""
    assert resolve_url("http://x", name) == expected
