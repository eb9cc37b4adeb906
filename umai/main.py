from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from umai.api import cards_router, feed_router, health_router, users_router
from umai.clients.users import UserClient
from umai.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the shared user client on startup and release it on shutdown."""
    async with UserClient() as user_client:
        app.state.user_client = user_client
        yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("umai"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(feed_router)
app.include_router(health_router)
app.include_router(users_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
