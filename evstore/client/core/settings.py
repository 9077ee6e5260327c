"""Connection settings.

``ConnectionSettings`` groups everything a connection needs besides its
endpoint: default credentials, the request timeout, the diagnostic error
callback, the logger sink and, optionally, a pre-built transport.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..runtime.rest.transport import Transport

# Invoked with (connection, exception); the return value is ignored.
ErrorHandler = Callable[[Any, BaseException], None]


def _default_connection_name() -> str:
    return f"evstore-http-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class UserCredentials:
    """Username/password pair sent with basic authentication."""

    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.username:
            raise ValueError("username must be a non-empty string")


@dataclass(frozen=True)
class ConnectionSettings:
    """Immutable settings applied to a connection.

    Args:
        connection_name: Name used in logs and exposed on the connection
        default_user_credentials: Credentials attached to every request
        connection_timeout: Total request/response timeout in seconds
        error_handler: Diagnostic callback invoked with (connection, exception)
        logger: Logger sink; defaults to the connection module's logger
        transport: Pre-built transport; defaults to an aiohttp ``HTTPClient``.
            The caller keeps ownership of an injected transport and closes
            it; connections only close the ``HTTPClient`` they create
    """

    connection_name: str = field(default_factory=_default_connection_name)
    default_user_credentials: UserCredentials | None = None
    connection_timeout: float | None = None
    error_handler: ErrorHandler | None = None
    logger: logging.Logger | None = None
    transport: Transport | None = None

    def __post_init__(self) -> None:
        if not self.connection_name:
            raise ValueError("connection_name must be a non-empty string")
        if self.connection_timeout is not None and self.connection_timeout <= 0:
            raise ValueError("connection_timeout must be positive")

    @classmethod
    def default(cls) -> ConnectionSettings:
        return cls()

    def with_credentials(self, username: str, password: str) -> ConnectionSettings:
        return replace(self, default_user_credentials=UserCredentials(username, password))

    def with_timeout(self, seconds: float | None) -> ConnectionSettings:
        return replace(self, connection_timeout=seconds)

    def with_error_handler(self, handler: ErrorHandler | None) -> ConnectionSettings:
        return replace(self, error_handler=handler)
