from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class FeedTab(str, Enum):
    """Recommendation tabs on the home screen, in display order."""

    MSFP = "MSFP"
    LOCAL = "Local"
    POPULAR = "Popular"


@dataclass(frozen=True, slots=True)
class FoodItem:
    """
    A recommended dish.

    Attributes:
        title: Dish name as displayed
        price: Price in USD
        rating: Average rating (0.0-5.0)
        image: Asset name of the dish photo
    """

    title: str
    price: Decimal
    rating: float
    image: str


@dataclass(frozen=True, slots=True)
class FeaturedType:
    """The BTI banner at the top of the home screen."""

    type_code: str
    tagline: str
    image: str
