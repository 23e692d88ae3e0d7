from enum import Enum

from google.api_core import exceptions as google_exceptions
from google.generativeai.types import BlockedPromptException, StopCandidateException


GENERIC_ERROR_MESSAGE = "Failed to process content. Please check the input or API key."


class ErrorKind(Enum):
    """Internal failure categories. Only used for logging."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    CONTENT_BLOCKED = "content_blocked"
    SERVICE = "service"
    UNKNOWN = "unknown"


class MissingCredentialsError(RuntimeError):
    """Raised when a request is attempted without an API key."""


class ProcessingError(Exception):
    """
    Single failure signal for a processing cycle.

    The message is always the generic user-facing one; the original
    exception stays reachable through ``__cause__`` for diagnostics.
    """

    def __init__(self, kind: ErrorKind = ErrorKind.UNKNOWN, message: str = GENERIC_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def classify_error(exc: BaseException) -> ErrorKind:
    if isinstance(exc, MissingCredentialsError):
        return ErrorKind.AUTH
    if isinstance(exc, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)):
        return ErrorKind.AUTH
    if isinstance(exc, google_exceptions.InvalidArgument) and "api key" in str(exc).lower():
        return ErrorKind.AUTH
    if isinstance(exc, (google_exceptions.ResourceExhausted, google_exceptions.TooManyRequests)):
        return ErrorKind.RATE_LIMIT
    if isinstance(
        exc,
        (
            google_exceptions.ServiceUnavailable,
            google_exceptions.DeadlineExceeded,
            google_exceptions.RetryError,
            ConnectionError,
            TimeoutError,
        ),
    ):
        return ErrorKind.NETWORK
    if isinstance(exc, google_exceptions.GoogleAPIError):
        return ErrorKind.SERVICE
    if isinstance(exc, (BlockedPromptException, StopCandidateException)):
        return ErrorKind.CONTENT_BLOCKED
    # The SDK raises ValueError from ``response.text`` when the candidate was
    # blocked and carries no text parts.
    if isinstance(exc, ValueError):
        return ErrorKind.CONTENT_BLOCKED
    return ErrorKind.UNKNOWN
