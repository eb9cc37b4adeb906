from umai.api.cards import router as cards_router
from umai.api.feed import router as feed_router
from umai.api.health import router as health_router
from umai.api.users import router as users_router

__all__ = [
    "cards_router",
    "feed_router",
    "health_router",
    "users_router",
]
