from umai.models.bti import (
    AXES,
    AxisLetter,
    Card,
    GradientColor,
    PatternStyle,
    all_type_codes,
    is_valid_type_code,
    pattern_style_for,
    tags_for,
)
from umai.models.food import FeaturedType, FeedTab, FoodItem
from umai.models.user import ErrorMessage, Support, UserRecord, UserResponse

__all__ = [
    "AXES",
    "AxisLetter",
    "Card",
    "ErrorMessage",
    "FeaturedType",
    "FeedTab",
    "FoodItem",
    "GradientColor",
    "PatternStyle",
    "Support",
    "UserRecord",
    "UserResponse",
    "all_type_codes",
    "is_valid_type_code",
    "pattern_style_for",
    "tags_for",
]
