"""Record store implementations."""

from bookofmemes.persistence.repository.record_store import PostgresRecordStore

__all__ = [
    "PostgresRecordStore",
]
