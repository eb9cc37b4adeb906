from umai.clients.errors import (
    DecodingFailedError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    NetworkErrorKind,
    RequestFailedError,
)
from umai.clients.users import UserClient, get_user_info

__all__ = [
    "DecodingFailedError",
    "InvalidResponseError",
    "InvalidURLError",
    "NetworkError",
    "NetworkErrorKind",
    "RequestFailedError",
    "UserClient",
    "get_user_info",
]
