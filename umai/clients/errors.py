"""
Network error taxonomy for the user client.

The set of kinds is closed. Every failure of a fetch surfaces as exactly one
of these, so callers can catch NetworkError and branch on ``kind``.
"""

from enum import Enum


class NetworkErrorKind(str, Enum):
    """Classification of user fetch failures."""

    # Endpoint could not be built; no I/O happened
    INVALID_URL = "invalid_url"

    # Transport failed or the response has no usable status
    INVALID_RESPONSE = "invalid_response"

    # Status code outside [200, 300)
    REQUEST_FAILED = "request_failed"

    # 2xx status but the body is not a valid user envelope
    DECODING_FAILED = "decoding_failed"


class NetworkError(Exception):
    """Base class for classified user fetch failures."""

    kind: NetworkErrorKind

    def __init__(self, kind: NetworkErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class InvalidURLError(NetworkError):
    """Raised when the request URL cannot be constructed."""

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        message = f"Invalid URL: {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(NetworkErrorKind.INVALID_URL, message)


class InvalidResponseError(NetworkError):
    """Raised when no well-formed HTTP response was received."""

    def __init__(self, message: str = "Invalid response"):
        super().__init__(NetworkErrorKind.INVALID_RESPONSE, message)


class RequestFailedError(NetworkError):
    """
    Raised for a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the server
        error_message: ``error`` field of the body, when it could be decoded
    """

    def __init__(self, status_code: int, error_message: str | None = None):
        self.status_code = status_code
        self.error_message = error_message
        message = f"Request failed: HTTP {status_code}"
        if error_message:
            message = f"{message}: {error_message}"
        super().__init__(NetworkErrorKind.REQUEST_FAILED, message)


class DecodingFailedError(NetworkError):
    """Raised when a 2xx body cannot be decoded into a user response."""

    def __init__(self, message: str = "Decoding failed"):
        super().__init__(NetworkErrorKind.DECODING_FAILED, message)
