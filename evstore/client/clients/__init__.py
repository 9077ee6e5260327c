"""High-level clients."""

from .connection import EventStoreHttpConnection

__all__ = ["EventStoreHttpConnection"]
