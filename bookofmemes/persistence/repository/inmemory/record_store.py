"""In-memory record store for testing."""

import re
from collections import defaultdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional, Sequence
from uuid import uuid4

from bookofmemes.domain.repository import Operator, Predicate, Query, RecordStore, Row
from bookofmemes.domain.value import Collection


def _plain(values: Mapping[str, Any]) -> Row:
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in values.items()
    }


def _like_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile an SQL LIKE pattern (backslash escapes) into a regex."""
    parts = []
    escaped = False
    for char in pattern:
        if escaped:
            parts.append(re.escape(char))
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def _matches(row: Row, predicate: Predicate) -> bool:
    value = row.get(predicate.column)
    target = predicate.value
    if isinstance(target, Enum):
        target = target.value
    if predicate.op == Operator.EQ:
        return value is not None and value == target
    if predicate.op == Operator.NEQ:
        # NULL never compares unequal in SQL
        return value is not None and value != target
    if predicate.op == Operator.IN:
        return value in {t.value if isinstance(t, Enum) else t for t in target}
    if predicate.op == Operator.GTE:
        return value is not None and value >= target
    if predicate.op == Operator.ILIKE:
        return value is not None and bool(_like_to_regex(target).fullmatch(str(value)))
    if predicate.op == Operator.IS_NULL:
        return value is None
    raise ValueError(f"Unsupported operator: {predicate.op}")


class InMemoryRecordStore(RecordStore):
    """In-memory implementation of RecordStore for testing.

    Rows are dictionaries keyed by column name. Missing ``id`` and
    ``created_at`` columns are filled in on insert, as the hosted database
    does with its column defaults.
    """

    def __init__(self) -> None:
        self._rows: dict[Collection, list[Row]] = defaultdict(list)

    def seed(self, collection: Collection, *rows: Mapping[str, Any]) -> list[Row]:
        """Insert rows synchronously (test setup helper)."""
        return [self._insert(collection, row) for row in rows]

    def rows(self, collection: Collection) -> list[Row]:
        """Snapshot of every row in a collection."""
        return [dict(row) for row in self._rows[collection]]

    def _insert(self, collection: Collection, values: Mapping[str, Any]) -> Row:
        row = _plain(values)
        row.setdefault("id", str(uuid4()))
        if row["id"] is None:
            row["id"] = str(uuid4())
        row.setdefault("created_at", datetime.now(timezone.utc))
        self._rows[collection].append(row)
        return dict(row)

    def _select(self, collection: Collection, query: Query) -> list[Row]:
        rows = [
            row
            for row in self._rows[collection]
            if all(_matches(row, p) for p in query.predicates)
        ]
        if query.order_by:
            key = query.order_by
            rows = sorted(
                rows,
                key=lambda r: (r.get(key) is None, r.get(key)),
                reverse=query.descending,
            )
        return rows

    async def find(self, collection: Collection, query: Query) -> list[Row]:
        """Return all rows matching the query."""
        rows = self._select(collection, query)
        if query.limit is not None:
            rows = rows[: query.limit]
        if query.columns:
            return [{c: row.get(c) for c in query.columns} for row in rows]
        return [dict(row) for row in rows]

    async def find_one(self, collection: Collection, query: Query) -> Optional[Row]:
        """Return the first matching row, or None."""
        rows = await self.find(collection, query.take(1))
        return rows[0] if rows else None

    async def count(self, collection: Collection, query: Query) -> int:
        """Count matching rows."""
        return len(self._select(collection, Query(predicates=query.predicates)))

    async def insert(self, collection: Collection, values: Mapping[str, Any]) -> Row:
        """Insert one row."""
        return self._insert(collection, values)

    async def upsert(
        self,
        collection: Collection,
        values: Mapping[str, Any],
        on_conflict: Sequence[str],
    ) -> Row:
        """Insert, or update the row sharing the conflict key."""
        row = _plain(values)
        for existing in self._rows[collection]:
            if all(existing.get(c) == row.get(c) for c in on_conflict):
                existing.update({k: v for k, v in row.items() if k != "id"})
                return dict(existing)
        return self._insert(collection, row)

    async def update(
        self, collection: Collection, query: Query, values: Mapping[str, Any]
    ) -> list[Row]:
        """Update matching rows."""
        changes = _plain(values)
        updated = []
        for row in self._select(collection, Query(predicates=query.predicates)):
            row.update(changes)
            updated.append(dict(row))
        return updated

    async def delete(self, collection: Collection, query: Query) -> int:
        """Delete matching rows."""
        doomed = {
            id(row)
            for row in self._select(collection, Query(predicates=query.predicates))
        }
        self._rows[collection] = [
            row for row in self._rows[collection] if id(row) not in doomed
        ]
        return len(doomed)
