"""Repository interfaces for Book of Memes.

The record store interface is defined in the domain layer (dependency
inversion). Implementations live in the persistence layer.
"""

from bookofmemes.domain.repository.record_store import (
    Operator,
    Predicate,
    Query,
    RecordStore,
    Row,
    eq,
    gte,
    ilike,
    in_,
    is_null,
    neq,
)

__all__ = [
    "Operator",
    "Predicate",
    "Query",
    "RecordStore",
    "Row",
    "eq",
    "gte",
    "ilike",
    "in_",
    "is_null",
    "neq",
]
