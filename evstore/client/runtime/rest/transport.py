"""Transport abstraction.

A transport sends one ``HttpRequest`` and returns the ``HttpResponse``
verbatim. It never interprets status codes; only connection-level failures
raise (``TransportError``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class HttpRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class HttpResponse:
    status: int
    reason: str = ""
    headers: dict[str, str] = field(default_factory=dict, kw_only=True)
    body: bytes = field(default=b"", kw_only=True)

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status < 300

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding, errors="replace")


@runtime_checkable
class Transport(Protocol):
    """Capability to execute HTTP requests.

    Implementations must be safe for several in-flight ``send`` calls on the
    same event loop.
    """

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Execute ``request``.

        Raises:
            TransportError: On DNS, connect or timeout failures
            ConnectionClosedError: If the transport was closed
        """
        ...

    async def close(self) -> None:
        """Release the underlying resources."""
        ...
