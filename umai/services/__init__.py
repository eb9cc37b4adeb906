from umai.services.card_catalog import (
    BTI_CARDS,
    CardCatalog,
    CatalogError,
    get_card_catalog,
    validate_catalog,
)
from umai.services.home_feed import (
    get_featured_type,
    get_recommendations,
    list_tabs,
)

__all__ = [
    "BTI_CARDS",
    "CardCatalog",
    "CatalogError",
    "get_card_catalog",
    "get_featured_type",
    "get_recommendations",
    "list_tabs",
    "validate_catalog",
]
