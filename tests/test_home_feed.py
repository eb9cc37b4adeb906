"""Tests for the home feed content."""

from decimal import Decimal

import pytest

from umai.models.food import FeedTab
from umai.services.card_catalog import get_card_catalog
from umai.services.home_feed import (
    DEFAULT_TAB,
    get_featured_type,
    get_recommendations,
    list_tabs,
)


class TestTabs:
    def test_display_order(self) -> None:
        assert list_tabs() == (FeedTab.MSFP, FeedTab.LOCAL, FeedTab.POPULAR)

    def test_default_tab(self) -> None:
        assert DEFAULT_TAB == FeedTab.MSFP


class TestRecommendations:
    @pytest.mark.parametrize("tab", list(FeedTab))
    def test_three_items_per_tab(self, tab: FeedTab) -> None:
        items = get_recommendations(tab)
        assert len(items) == 3
        assert [item.price for item in items] == [
            Decimal("25.00"),
            Decimal("18.00"),
            Decimal("15.00"),
        ]
        assert [item.rating for item in items] == [4.8, 4.9, 4.7]

    def test_accepts_tab_string(self) -> None:
        titles = [item.title for item in get_recommendations("Popular")]
        assert titles == ["Yakisoba", "Yukhoe", "Sushi"]

    def test_local_tab(self) -> None:
        titles = [item.title for item in get_recommendations(FeedTab.LOCAL)]
        assert titles == ["Omurice", "rice cake", "Sashimi"]

    def test_image_matches_title(self) -> None:
        for tab in FeedTab:
            for item in get_recommendations(tab):
                assert item.image == item.title

    @pytest.mark.parametrize("tab", ["", "popular", "Trending"])
    def test_unknown_tab_is_empty(self, tab: str) -> None:
        assert get_recommendations(tab) == ()


class TestFeaturedType:
    def test_featured_type_is_in_catalog(self) -> None:
        featured = get_featured_type()
        assert featured.type_code == "CTSP"
        assert featured.type_code in get_card_catalog()
        assert featured.image == "deopbap"
