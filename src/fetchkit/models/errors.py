from enum import Enum
from typing import Any, Optional

HTTP_STATUS_MESSAGES: dict[int, str] = {
    400: "Bad Request (400)",
    401: "Unauthorized (401)",
    403: "Forbidden (403)",
    404: "Not Found (404)",
    500: "Internal Server Error (500)",
}


class ErrorKind(str, Enum):
    ABORTED = "aborted"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    BUSINESS = "business"


class RequestError(Exception):
    """Base class for every error raised by a fetchkit request."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ClassifiedError(RequestError):
    """Terminal, tagged outcome of a failed request.

    Each classified error carries exactly one user-visible notification text.
    Callers can match on the concrete subclass or on ``kind``.
    """

    kind: ErrorKind

    @property
    def notification(self) -> str:
        return self.message


class RequestAborted(ClassifiedError):
    """Raised when the request was cancelled before it settled (timeout)."""

    kind = ErrorKind.ABORTED
    __match_args__ = ("timeout_ms",)

    def __init__(self, timeout_ms: Optional[int] = None):
        self.timeout_ms = timeout_ms
        super().__init__("Request timed out")


class NetworkFault(ClassifiedError):
    """Raised on transport-level failures (DNS, refused connection, reset)."""

    kind = ErrorKind.NETWORK
    __match_args__ = ("reason",)

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Request failed: {reason}")


class HttpStatusFault(ClassifiedError):
    """Raised when the server answered with a status outside 2xx."""

    kind = ErrorKind.HTTP_STATUS
    __match_args__ = ("status_code",)

    def __init__(self, status_code: int, body: bytes = b""):
        self.status_code = status_code
        self.body = body
        super().__init__(
            HTTP_STATUS_MESSAGES.get(status_code, f"HTTP Error: {status_code}")
        )


class BusinessFault(ClassifiedError):
    """Raised when a 2xx JSON body embeds a non-zero application code."""

    kind = ErrorKind.BUSINESS
    __match_args__ = ("code", "error_message")

    def __init__(self, code: Any, error_message: str, data: Any = None):
        self.code = code
        self.error_message = error_message
        self.data = data
        super().__init__(f"Error Code: {code}, Message: {error_message}")


class DecodeFault(RequestError):
    """Raised when a response body does not match the declared response type.

    Decode faults are surfaced to the caller as-is. They are not part of the
    classified taxonomy and produce no notification.
    """

    def __init__(self, response_type: str, reason: str):
        self.response_type = response_type
        self.reason = reason
        super().__init__(f"Could not decode response as {response_type}: {reason}")
