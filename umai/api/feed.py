"""
Home feed endpoints.
"""

from decimal import Decimal

from fastapi import APIRouter
from pydantic import BaseModel, Field

from umai.models.food import FeedTab, FoodItem
from umai.services.home_feed import (
    DEFAULT_TAB,
    get_featured_type,
    get_recommendations,
    list_tabs,
)

router = APIRouter(prefix="/feed", tags=["feed"])


class FeaturedTypeResponse(BaseModel):
    type_code: str
    tagline: str
    image: str


class FeedResponse(BaseModel):
    """Home screen header: featured type and available tabs."""

    featured: FeaturedTypeResponse
    tabs: list[FeedTab]
    default_tab: FeedTab


class FoodItemResponse(BaseModel):
    title: str
    price: Decimal = Field(description='USD price, serialized as a decimal string such as "25.00"')
    rating: float
    image: str

    @classmethod
    def from_item(cls, item: FoodItem) -> "FoodItemResponse":
        return cls(title=item.title, price=item.price, rating=item.rating, image=item.image)


@router.get("", response_model=FeedResponse)
async def get_feed() -> FeedResponse:
    featured = get_featured_type()
    return FeedResponse(
        featured=FeaturedTypeResponse(
            type_code=featured.type_code,
            tagline=featured.tagline,
            image=featured.image,
        ),
        tabs=list(list_tabs()),
        default_tab=DEFAULT_TAB,
    )


@router.get("/{tab}", response_model=list[FoodItemResponse])
async def get_tab(tab: str) -> list[FoodItemResponse]:
    """
    Recommendations for a tab.

    An unknown tab yields an empty list rather than an error.
    """
    return [FoodItemResponse.from_item(item) for item in get_recommendations(tab)]
