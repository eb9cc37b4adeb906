"""
Demo user client.

Fetches a single user from the user service (GET /api/users/{id}) and
classifies every failure into a NetworkError kind. One attempt per call,
no caching and no retry.
"""

import logging
from types import TracebackType

import httpx
from pydantic import ValidationError

from umai.clients.errors import (
    DecodingFailedError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    RequestFailedError,
)
from umai.config import settings
from umai.models.user import ErrorMessage, UserResponse

logger = logging.getLogger(__name__)

USERS_PATH = "/api/users/{user_id}"
REQUEST_HEADERS = {"Content-Type": "application/json"}


class UserClient:
    """
    Client for the demo user service.

    Construct one per process and pass it to callers; concurrent fetches
    share only the underlying connection pool.

    Usage:
        async with UserClient() as client:
            response = await client.fetch_user(2)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the user client.

        Args:
            base_url: Service base URL. Defaults to settings.users_api_url.
            timeout: Request timeout in seconds. Defaults to settings.request_timeout.
            http_client: Optional shared httpx client. When given, the caller
                owns it and aclose() leaves it open.
        """
        self.base_url = (base_url if base_url is not None else settings.users_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)

    async def __aenter__(self) -> "UserClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the connection pool if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    def user_url(self, user_id: int) -> httpx.URL:
        """
        Build the endpoint URL for a user.

        Raises:
            InvalidURLError: If the URL is malformed or not absolute http(s)
        """
        raw = f"{self.base_url}{USERS_PATH.format(user_id=user_id)}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise InvalidURLError(raw, str(e)) from e

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(raw, "expected an absolute http(s) URL")
        return url

    async def fetch_user(self, user_id: int) -> UserResponse:
        """
        Fetch a user by id.

        The id is not range-checked; the service rejects unknown ids with a
        non-2xx status.

        Args:
            user_id: Remote user id

        Returns:
            Fully decoded UserResponse

        Raises:
            InvalidURLError: If the endpoint cannot be built
            InvalidResponseError: If the transport fails
            RequestFailedError: If the status is outside [200, 300)
            DecodingFailedError: If a 2xx body is not a valid user envelope
        """
        try:
            url = self.user_url(user_id)
        except InvalidURLError as e:
            logger.warning("User %s not fetched: %s", user_id, e.message)
            raise

        try:
            response = await self._client.get(url, headers=REQUEST_HEADERS)
        except httpx.RequestError as e:
            logger.warning("Transport failure fetching user %s: %s", user_id, e)
            raise InvalidResponseError(f"Transport failure: {type(e).__name__}") from e

        if not 200 <= response.status_code < 300:
            error_message = _diagnostic_message(response)
            if error_message is not None:
                logger.debug("Error message for user %s: %s", user_id, error_message)
            logger.warning("User %s request failed: HTTP %d", user_id, response.status_code)
            raise RequestFailedError(response.status_code, error_message)

        try:
            return UserResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("Could not decode user %s: %d errors", user_id, e.error_count())
            raise DecodingFailedError(f"Decoding failed: {e.error_count()} errors") from e


def _diagnostic_message(response: httpx.Response) -> str | None:
    """Best-effort decode of an ``{"error": ...}`` body. Never raises."""
    try:
        return ErrorMessage.model_validate_json(response.content).error
    except ValidationError:
        return None


async def get_user_info(client: UserClient, user_id: int = 2) -> UserResponse | None:
    """
    Fetch the demo user.

    Failures are already logged by fetch_user.

    Returns:
        The response, or None when the fetch failed
    """
    try:
        user_info = await client.fetch_user(user_id)
    except NetworkError:
        return None

    logger.info("User info: %s", user_info.user.full_name)
    return user_info
