"""
Home feed content.

Static recommendations shown on the home screen: the featured BTI banner
and three dishes for each recommendation tab.
"""

from decimal import Decimal

from umai.models.food import FeaturedType, FeedTab, FoodItem

FEATURED_TYPE = FeaturedType(
    type_code="CTSP",
    tagline="The food is familiar and upscale, with an emphasis on quality.",
    image="deopbap",
)

DEFAULT_TAB = FeedTab.MSFP


def _item(title: str, price: str, rating: float) -> FoodItem:
    return FoodItem(title=title, price=Decimal(price), rating=rating, image=title)


RECOMMENDATIONS: dict[FeedTab, tuple[FoodItem, ...]] = {
    FeedTab.MSFP: (
        _item("Hot Pot", "25.00", 4.8),
        _item("ramen", "18.00", 4.9),
        _item("deopbap", "15.00", 4.7),
    ),
    FeedTab.LOCAL: (
        _item("Omurice", "25.00", 4.8),
        _item("rice cake", "18.00", 4.9),
        _item("Sashimi", "15.00", 4.7),
    ),
    FeedTab.POPULAR: (
        _item("Yakisoba", "25.00", 4.8),
        _item("Yukhoe", "18.00", 4.9),
        _item("Sushi", "15.00", 4.7),
    ),
}


def get_featured_type() -> FeaturedType:
    """The BTI type highlighted at the top of the home screen."""
    return FEATURED_TYPE


def list_tabs() -> tuple[FeedTab, ...]:
    """Recommendation tabs in display order."""
    return tuple(FeedTab)


def get_recommendations(tab: str | FeedTab) -> tuple[FoodItem, ...]:
    """
    Dishes recommended under a tab.

    Args:
        tab: Tab value (e.g., "MSFP", "Local", "Popular")

    Returns:
        Items in display order; empty for an unknown tab
    """
    try:
        feed_tab = FeedTab(tab)
    except ValueError:
        return ()
    return RECOMMENDATIONS[feed_tab]
