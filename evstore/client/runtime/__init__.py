"""Runtime layer: transports used by the connection."""

from .rest import HTTPClient, HttpRequest, HttpResponse, Transport

__all__ = [
    "HTTPClient",
    "HttpRequest",
    "HttpResponse",
    "Transport",
]
