"""Request construction API."""

from .request_builder import StreamRequestBuilder, long_poll_seconds, validate_stream_name

__all__ = [
    "StreamRequestBuilder",
    "long_poll_seconds",
    "validate_stream_name",
]
