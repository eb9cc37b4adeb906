"""
Demo user endpoint.

Proxies the user service and maps network error kinds to HTTP statuses.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from umai.clients.errors import NetworkError, NetworkErrorKind, RequestFailedError
from umai.clients.users import UserClient

router = APIRouter(prefix="/users", tags=["users"])


class UserProfileResponse(BaseModel):
    """Response model for a demo user."""

    id: int
    email: str
    first_name: str
    last_name: str
    full_name: str
    avatar_url: str


def get_user_client(request: Request) -> UserClient:
    """Dependency returning the app's shared user client."""
    return request.app.state.user_client


def _status_for(error: NetworkError) -> int:
    if isinstance(error, RequestFailedError) and error.status_code == 404:
        return status.HTTP_404_NOT_FOUND
    if error.kind == NetworkErrorKind.INVALID_URL:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_502_BAD_GATEWAY


@router.get(
    "/{user_id}",
    response_model=UserProfileResponse,
    responses={404: {"description": "User not found"}, 502: {"description": "Upstream failure"}},
)
async def get_user(
    user_id: int,
    client: Annotated[UserClient, Depends(get_user_client)],
) -> UserProfileResponse:
    """Fetch a demo user from the user service."""
    try:
        response = await client.fetch_user(user_id)
    except NetworkError as e:
        raise HTTPException(
            status_code=_status_for(e),
            detail={"kind": e.kind.value, "message": e.message},
        ) from e

    user = response.user
    return UserProfileResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        full_name=user.full_name,
        avatar_url=user.avatar_url,
    )
