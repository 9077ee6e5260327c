"""Custom exception hierarchy."""

from __future__ import annotations


class EventStoreError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(EventStoreError):
    """Network-level failure (DNS, connect, timeout).

    Raised by the transport only; HTTP status codes never produce this error.
    """

    pass


class ConnectionClosedError(EventStoreError):
    """Operation attempted on a connection or transport that was closed."""

    pass


class StoreError(EventStoreError):
    """Store answered with a non-success status that is not otherwise classified."""

    def __init__(self, body: str, reason: str, status_code: int) -> None:
        super().__init__(f"{status_code} {reason}".strip())
        self.body = body
        self.reason = reason
        self.status_code = status_code


class EventNotFoundError(StoreError):
    """Event body requested through the object-graph read does not exist.

    The typed read reports the same outcome as ``EventReadStatus.NOT_FOUND``
    instead of raising.
    """

    def __init__(self, url: str, status_code: int = 404, body: str = "") -> None:
        super().__init__(body, "Not Found", status_code)
        self.url = url

    def __str__(self) -> str:
        return f"Event not found: {self.url}"


class DecodeError(EventStoreError):
    """Successful response whose body could not be decoded into the target shape."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url
