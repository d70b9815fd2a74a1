"""Table-oriented gateway standing in for the hosted data backend.

Every use case talks to persistence through :class:`DataService`: filtered
queries, inserts, patch updates and insert subscriptions. The blocking
SQLAlchemy work runs in a worker thread so callers on the event loop only
ever await it; insert events are published back on the calling loop once
the row is committed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import Any, TypeVar, Union

import anyio
from sqlalchemy import and_, func, or_, select
from sqlalchemy import update as sql_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from boardingfinder.domain.errors import TransientFetchError
from boardingfinder.infrastructure.models import TABLES
from boardingfinder.infrastructure.realtime import (
    ChangeFeed,
    InsertEvent,
    SubscriptionHandle,
)
from boardingfinder.utils import ensure_utc

logger = logging.getLogger(__name__)

T = TypeVar("T")
Row = dict[str, Any]


@dataclass(frozen=True)
class Eq:
    column: str
    value: Any


@dataclass(frozen=True)
class In:
    column: str
    values: tuple[Any, ...]


@dataclass(frozen=True)
class AllOf:
    clauses: tuple["Filter", ...]


@dataclass(frozen=True)
class AnyOf:
    clauses: tuple["Filter", ...]


Filter = Union[Eq, In, AllOf, AnyOf]


@dataclass(frozen=True)
class Order:
    column: str
    descending: bool = False


def eq(column: str, value: Any) -> Eq:
    return Eq(column, value)


def is_in(column: str, values: Sequence[Any]) -> In:
    return In(column, tuple(values))


def all_of(*clauses: Filter) -> AllOf:
    return AllOf(tuple(clauses))


def any_of(*clauses: Filter) -> AnyOf:
    return AnyOf(tuple(clauses))


def ascending(column: str) -> Order:
    return Order(column)


def descending(column: str) -> Order:
    return Order(column, descending=True)


class DataService:
    """Query, insert, update and subscribe against named tables."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        change_feed: ChangeFeed,
        *,
        tables: Mapping[str, type] = TABLES,
    ) -> None:
        self._session_factory = session_factory
        self._change_feed = change_feed
        self._tables = dict(tables)

    @property
    def change_feed(self) -> ChangeFeed:
        return self._change_feed

    async def query(
        self,
        table: str,
        filter: Filter | None = None,
        order: Order | Sequence[Order] | None = None,
        limit: int | None = None,
    ) -> list[Row]:
        model = self._model(table)
        orders = _as_orders(order)
        return await self._run(
            "query", table, partial(self._query_sync, model, filter, orders, limit)
        )

    async def count(self, table: str, filter: Filter | None = None) -> int:
        model = self._model(table)
        return await self._run("count", table, partial(self._count_sync, model, filter))

    async def insert(self, table: str, row: Mapping[str, Any]) -> Row:
        model = self._model(table)
        self._check_columns(model, row.keys())
        inserted = await self._run("insert", table, partial(self._insert_sync, model, dict(row)))
        self._change_feed.publish(InsertEvent(table=table, row=dict(inserted)))
        return inserted

    async def update(self, table: str, filter: Filter, patch: Mapping[str, Any]) -> int:
        """Apply ``patch`` to every row matching ``filter``; return the row count."""

        model = self._model(table)
        self._check_columns(model, patch.keys())
        if not patch:
            return 0
        return await self._run(
            "update", table, partial(self._update_sync, model, filter, dict(patch))
        )

    def subscribe_to_inserts(
        self, table: str, on_event: Callable[[InsertEvent], None]
    ) -> SubscriptionHandle:
        self._model(table)
        return self._change_feed.subscribe_to_inserts(table, on_event)

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        self._change_feed.unsubscribe(handle)

    async def _run(self, operation: str, table: str, work: Callable[[], T]) -> T:
        try:
            return await anyio.to_thread.run_sync(work)
        except SQLAlchemyError as exc:
            logger.warning("Data service %s on %s failed: %s", operation, table, exc)
            raise TransientFetchError(operation, table, exc.__class__.__name__) from exc

    def _query_sync(
        self,
        model: type,
        filter: Filter | None,
        orders: list[Order],
        limit: int | None,
    ) -> list[Row]:
        statement = select(model)
        if filter is not None:
            statement = statement.where(self._compile(model, filter))
        for order in orders:
            column = self._column(model, order.column)
            statement = statement.order_by(column.desc() if order.descending else column.asc())
        if limit is not None:
            statement = statement.limit(limit)
        with self._session_factory() as session:
            return [_to_row(instance) for instance in session.scalars(statement).all()]

    def _count_sync(self, model: type, filter: Filter | None) -> int:
        statement = select(func.count()).select_from(model)
        if filter is not None:
            statement = statement.where(self._compile(model, filter))
        with self._session_factory() as session:
            return int(session.execute(statement).scalar_one())

    def _insert_sync(self, model: type, row: Row) -> Row:
        with self._session_factory() as session:
            # Omitted or None values fall back to the column defaults.
            instance = model(**{key: value for key, value in row.items() if value is not None})
            session.add(instance)
            try:
                session.commit()
            except SQLAlchemyError:
                session.rollback()
                raise
            session.refresh(instance)
            return _to_row(instance)

    def _update_sync(self, model: type, filter: Filter, patch: Row) -> int:
        statement = (
            sql_update(model)
            .where(self._compile(model, filter))
            .values(**patch)
            .execution_options(synchronize_session=False)
        )
        with self._session_factory() as session:
            try:
                result = session.execute(statement)
                session.commit()
            except SQLAlchemyError:
                session.rollback()
                raise
            return int(result.rowcount or 0)

    def _compile(self, model: type, clause: Filter):
        if isinstance(clause, Eq):
            column = self._column(model, clause.column)
            return column.is_(None) if clause.value is None else column == clause.value
        if isinstance(clause, In):
            return self._column(model, clause.column).in_(clause.values)
        if isinstance(clause, AllOf):
            return and_(*(self._compile(model, inner) for inner in clause.clauses))
        if isinstance(clause, AnyOf):
            return or_(*(self._compile(model, inner) for inner in clause.clauses))
        raise TypeError(f"Unsupported filter clause: {clause!r}")

    def _model(self, table: str) -> type:
        try:
            return self._tables[table]
        except KeyError:
            raise ValueError(f"Unknown table '{table}'") from None

    @staticmethod
    def _column(model: type, name: str):
        if name not in model.__table__.columns.keys():
            raise ValueError(f"Unknown column '{name}' on {model.__tablename__}")
        return getattr(model, name)

    @staticmethod
    def _check_columns(model: type, names) -> None:
        unknown = sorted(set(names) - set(model.__table__.columns.keys()))
        if unknown:
            raise ValueError(f"Unknown columns for {model.__tablename__}: {', '.join(unknown)}")


def _as_orders(order: Order | Sequence[Order] | None) -> list[Order]:
    if order is None:
        return []
    if isinstance(order, Order):
        return [order]
    return list(order)


def _to_row(instance: Any) -> Row:
    row: Row = {}
    for column in instance.__table__.columns:
        value = getattr(instance, column.key)
        if isinstance(value, datetime):
            value = ensure_utc(value)
        row[column.key] = value
    return row


__all__ = [
    "AllOf",
    "AnyOf",
    "DataService",
    "Eq",
    "Filter",
    "In",
    "Order",
    "Row",
    "all_of",
    "any_of",
    "ascending",
    "descending",
    "eq",
    "is_in",
]
