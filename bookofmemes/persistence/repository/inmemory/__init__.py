"""In-memory record store for testing."""

from .record_store import InMemoryRecordStore

__all__ = [
    "InMemoryRecordStore",
]
