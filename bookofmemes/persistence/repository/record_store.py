"""PostgreSQL implementation of the record store."""

from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, AsyncIterator, Mapping, Optional, Sequence

import logfire
from sqlalchemy import ColumnElement, Select, Table, delete, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookofmemes.domain.error import UpstreamError
from bookofmemes.domain.repository import Operator, Predicate, Query, RecordStore, Row
from bookofmemes.domain.value import Collection
from bookofmemes.persistence.tables import TABLES


def _condition(table: Table, predicate: Predicate) -> ColumnElement[bool]:
    """Translate a predicate into a SQL expression."""
    column = table.c[predicate.column]
    if predicate.op == Operator.EQ:
        return column == predicate.value
    if predicate.op == Operator.NEQ:
        return column != predicate.value
    if predicate.op == Operator.IN:
        return column.in_(predicate.value)
    if predicate.op == Operator.GTE:
        return column >= predicate.value
    if predicate.op == Operator.ILIKE:
        return column.ilike(predicate.value)
    if predicate.op == Operator.IS_NULL:
        return column.is_(None)
    raise ValueError(f"Unsupported operator: {predicate.op}")


def _apply(stmt: Any, table: Table, query: Query) -> Any:
    """Apply the query's predicates as WHERE clauses."""
    for predicate in query.predicates:
        stmt = stmt.where(_condition(table, predicate))
    return stmt


def _values(values: Mapping[str, Any]) -> dict[str, Any]:
    """Plain column values (enum members are stored by value)."""
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in values.items()
    }


class PostgresRecordStore(RecordStore):
    """Record store backed by SQLAlchemy Core on an async session.

    Each statement runs inside a savepoint so a failed statement does not
    poison the rest of the request's transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize record store with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def _guard(
        self, operation: str, collection: Collection
    ) -> AsyncIterator[None]:
        """Run a statement in a savepoint and translate driver failures."""
        try:
            async with self.session.begin_nested():
                yield
        except SQLAlchemyError as e:
            logfire.error(
                "Record store call failed",
                operation=operation,
                collection=collection.value,
                error=str(e),
            )
            raise UpstreamError(operation, collection.value, str(e)) from e

    def _select(self, table: Table, query: Query) -> Select:
        if query.columns:
            stmt = select(*(table.c[name] for name in query.columns))
        else:
            stmt = select(table)
        stmt = _apply(stmt, table, query)
        if query.order_by:
            column = table.c[query.order_by]
            stmt = stmt.order_by(column.desc() if query.descending else column.asc())
        if query.limit is not None:
            stmt = stmt.limit(query.limit)
        return stmt

    async def find(self, collection: Collection, query: Query) -> list[Row]:
        """Return all rows matching the query."""
        table = TABLES[collection]
        async with self._guard("find", collection):
            result = await self.session.execute(self._select(table, query))
            return [row._asdict() for row in result.fetchall()]

    async def find_one(self, collection: Collection, query: Query) -> Optional[Row]:
        """Return the first matching row, or None."""
        rows = await self.find(collection, query.take(1))
        return rows[0] if rows else None

    async def count(self, collection: Collection, query: Query) -> int:
        """Count matching rows."""
        table = TABLES[collection]
        stmt = _apply(select(func.count()).select_from(table), table, query)
        async with self._guard("count", collection):
            result = await self.session.execute(stmt)
            return int(result.scalar_one())

    async def insert(self, collection: Collection, values: Mapping[str, Any]) -> Row:
        """Insert one row and return it as stored."""
        table = TABLES[collection]
        stmt = insert(table).values(**_values(values)).returning(*table.c)
        async with self._guard("insert", collection):
            result = await self.session.execute(stmt)
            return result.fetchone()._asdict()

    async def upsert(
        self,
        collection: Collection,
        values: Mapping[str, Any],
        on_conflict: Sequence[str],
    ) -> Row:
        """Insert or update on the conflict key (``INSERT ... ON CONFLICT``)."""
        table = TABLES[collection]
        row = _values(values)
        stmt = pg_insert(table).values(**row)
        updates = {
            key: stmt.excluded[key] for key in row if key not in set(on_conflict)
        }
        if not updates:
            # DO NOTHING would return no row for an existing record
            updates = {on_conflict[0]: stmt.excluded[on_conflict[0]]}
        stmt = stmt.on_conflict_do_update(
            index_elements=list(on_conflict), set_=updates
        ).returning(*table.c)
        async with self._guard("upsert", collection):
            result = await self.session.execute(stmt)
            return result.fetchone()._asdict()

    async def update(
        self, collection: Collection, query: Query, values: Mapping[str, Any]
    ) -> list[Row]:
        """Update matching rows and return them as stored."""
        table = TABLES[collection]
        stmt = _apply(update(table), table, query)
        stmt = stmt.values(**_values(values)).returning(*table.c)
        async with self._guard("update", collection):
            result = await self.session.execute(stmt)
            return [row._asdict() for row in result.fetchall()]

    async def delete(self, collection: Collection, query: Query) -> int:
        """Delete matching rows."""
        table = TABLES[collection]
        stmt = _apply(delete(table), table, query)
        async with self._guard("delete", collection):
            result = await self.session.execute(stmt)
            return result.rowcount or 0
