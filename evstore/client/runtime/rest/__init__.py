"""REST runtime abstractions."""

from .http_client import HTTPClient
from .transport import HttpRequest, HttpResponse, Transport

__all__ = [
    "HTTPClient",
    "HttpRequest",
    "HttpResponse",
    "Transport",
]
