"""Exceptions raised by the CrossEra SDK.

Every failed HTTP exchange surfaces as an ``APIError`` subclass carrying the
network it was sent to and, when the server answered, the HTTP status code.
Callers can branch on the class, ``kind`` or ``status`` instead of parsing
messages.
"""

from typing import Any, Optional


class CrossEraError(Exception):
    """Base class for all SDK errors."""
    pass


class ValidationError(CrossEraError, ValueError):
    """Raised when an address, hash or network is malformed. No request is made."""
    pass


class InternalConfigError(CrossEraError, RuntimeError):
    """Raised when a network has no transport. Indicates a packaging defect."""
    pass


class APIError(CrossEraError):
    """A request to a CrossEra backend failed."""

    kind = "api"

    def __init__(
        self,
        message: str,
        network: Optional[str] = None,
        status: Optional[int] = None,
        response_data: Any = None,
    ):
        self.message = message
        self.network = network
        self.status = status
        self.response_data = response_data
        super().__init__(message)

    def with_message(self, message: str) -> "APIError":
        """Copy of this error with a new message and the same structured fields."""
        return type(self)(
            message,
            network=self.network,
            status=self.status,
            response_data=self.response_data,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"network={self.network!r}, status={self.status!r})"
        )


class RemoteError(APIError):
    """The server answered with a non-2xx status or an unusable body."""

    kind = "remote"


class NotFoundError(RemoteError):
    """The server answered 404."""

    kind = "not_found"


class ConflictError(RemoteError):
    """The server answered 409: the transaction was already submitted."""

    kind = "conflict"


class TransportError(APIError):
    """The request was sent but no response arrived (timeout, DNS, refused)."""

    kind = "transport"


class RequestError(APIError):
    """The request could not be built."""

    kind = "request"
