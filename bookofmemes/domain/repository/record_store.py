"""Record store interface.

The record store is the hosted database. Services describe what they want
with a :class:`Query` (a conjunction of predicates, an optional ordering
and limit) and get plain rows back as dictionaries.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from bookofmemes.domain.value import Collection

Row = dict[str, Any]


class Operator(str, Enum):
    """Comparison applied by a predicate."""

    EQ = "eq"
    NEQ = "neq"
    IN = "in"
    GTE = "gte"
    ILIKE = "ilike"
    IS_NULL = "is_null"


@dataclass(frozen=True)
class Predicate:
    """A single column condition."""

    column: str
    op: Operator
    value: Any = None


def eq(column: str, value: Any) -> Predicate:
    return Predicate(column, Operator.EQ, value)


def neq(column: str, value: Any) -> Predicate:
    return Predicate(column, Operator.NEQ, value)


def in_(column: str, values: Sequence[Any]) -> Predicate:
    return Predicate(column, Operator.IN, tuple(values))


def gte(column: str, value: Any) -> Predicate:
    return Predicate(column, Operator.GTE, value)


def ilike(column: str, pattern: str) -> Predicate:
    """Case-insensitive SQL pattern match (``%`` and ``_`` wildcards)."""
    return Predicate(column, Operator.ILIKE, pattern)


def is_null(column: str) -> Predicate:
    return Predicate(column, Operator.IS_NULL)


@dataclass(frozen=True)
class Query:
    """Conjunction of predicates with optional ordering and limit.

    Example:
        Query.where(eq("item_id", item_id)).order("created_at")
    """

    predicates: tuple[Predicate, ...] = ()
    order_by: Optional[str] = None
    descending: bool = False
    limit: Optional[int] = None
    columns: Optional[tuple[str, ...]] = field(default=None)

    @classmethod
    def where(cls, *predicates: Predicate) -> "Query":
        return cls(predicates=tuple(predicates))

    def and_(self, *predicates: Predicate) -> "Query":
        return replace(self, predicates=self.predicates + tuple(predicates))

    def order(self, column: str, descending: bool = False) -> "Query":
        return replace(self, order_by=column, descending=descending)

    def take(self, limit: int) -> "Query":
        return replace(self, limit=limit)

    def select(self, *columns: str) -> "Query":
        return replace(self, columns=tuple(columns))


class RecordStore(ABC):
    """Gateway to the hosted database.

    Every method raises :class:`~bookofmemes.domain.error.UpstreamError`
    when the underlying call fails.
    """

    @abstractmethod
    async def find(self, collection: Collection, query: Query) -> list[Row]:
        """Return all rows matching the query."""
        pass

    @abstractmethod
    async def find_one(self, collection: Collection, query: Query) -> Optional[Row]:
        """Return the first matching row, or None."""
        pass

    @abstractmethod
    async def count(self, collection: Collection, query: Query) -> int:
        """Count matching rows. Ordering and limit are ignored."""
        pass

    @abstractmethod
    async def insert(self, collection: Collection, values: Mapping[str, Any]) -> Row:
        """Insert one row and return it as stored."""
        pass

    @abstractmethod
    async def upsert(
        self,
        collection: Collection,
        values: Mapping[str, Any],
        on_conflict: Sequence[str],
    ) -> Row:
        """Insert a row, or update the existing row with the same conflict key.

        Args:
            collection: Target collection
            values: Column values
            on_conflict: Columns forming the uniqueness constraint

        Returns:
            The stored row
        """
        pass

    @abstractmethod
    async def update(
        self, collection: Collection, query: Query, values: Mapping[str, Any]
    ) -> list[Row]:
        """Update matching rows and return them as stored."""
        pass

    @abstractmethod
    async def delete(self, collection: Collection, query: Query) -> int:
        """Delete matching rows.

        Returns:
            Number of rows deleted
        """
        pass
