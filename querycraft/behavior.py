"""Shared rendering helpers and the base class of every query builder."""

from __future__ import annotations

import builtins
import copy as _copy
import dataclasses
from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence, Tuple, TypeVar

from .formatting import Formatter, format_query, multiline, one_line

__all__ = [
    "QueryBuilder",
    "push_unique",
    "raw_queries",
    "concat_raw_before_after",
    "concat_raw",
    "concat_from",
    "concat_returning",
    "concat_values",
    "concat_where",
    "concat_with",
]

T = TypeVar("T")
RawItem = Tuple[Enum, str]
B = TypeVar("B", bound="QueryBuilder")


def push_unique(items: list[T], value: T) -> None:
    """Append ``value`` unless an equal item is already present."""
    if value not in items:
        items.append(value)


def raw_queries(raw_list: Sequence[RawItem], clause: Enum) -> list[str]:
    """Return the raw SQL attached to ``clause``, in insertion order."""
    return [sql for item_clause, sql in raw_list if item_clause == clause]


def concat_raw_before_after(
    items_before: Sequence[RawItem],
    items_after: Sequence[RawItem],
    query: str,
    fmts: Formatter,
    clause: Enum,
    sql: str,
) -> str:
    """Append ``sql`` to ``query`` surrounded by the raw SQL of ``clause``."""
    space = fmts.space
    raw_before = space.join(raw_queries(items_before, clause))
    raw_after = space.join(raw_queries(items_after, clause))
    space_before = space if raw_before else ""
    space_after = space if raw_after else ""
    return f"{query}{raw_before}{space_before}{sql}{raw_after}{space_after}"


def concat_raw(query: str, fmts: Formatter, items: Sequence[str]) -> str:
    """Append the builder's leading raw SQL fragments."""
    if not items:
        return query
    return f"{query}{fmts.space.join(items)}{fmts.space}{fmts.lb}"


def concat_from(
    items_before: Sequence[RawItem],
    items_after: Sequence[RawItem],
    query: str,
    fmts: Formatter,
    clause: Enum,
    items: Sequence[str],
) -> str:
    """Render the FROM clause."""
    sql = f"FROM{fmts.space}{fmts.comma.join(items)}{fmts.space}{fmts.lb}" if items else ""
    return concat_raw_before_after(items_before, items_after, query, fmts, clause, sql)


def concat_returning(
    items_before: Sequence[RawItem],
    items_after: Sequence[RawItem],
    query: str,
    fmts: Formatter,
    clause: Enum,
    items: Sequence[str],
) -> str:
    """Render the RETURNING clause."""
    sql = f"RETURNING{fmts.space}{fmts.comma.join(items)}{fmts.space}{fmts.lb}" if items else ""
    return concat_raw_before_after(items_before, items_after, query, fmts, clause, sql)


def concat_values(
    items_before: Sequence[RawItem],
    items_after: Sequence[RawItem],
    query: str,
    fmts: Formatter,
    clause: Enum,
    items: Sequence[str],
) -> str:
    """Render the VALUES clause, one row expression per entry."""
    sql = ""
    if items:
        values = f"{fmts.comma}{fmts.lb}".join(items)
        sql = f"VALUES{fmts.space}{fmts.lb}{values}{fmts.space}{fmts.lb}"
    return concat_raw_before_after(items_before, items_after, query, fmts, clause, sql)


def concat_where(
    items_before: Sequence[RawItem],
    items_after: Sequence[RawItem],
    query: str,
    fmts: Formatter,
    clause: Enum,
    items: Sequence[str],
) -> str:
    """Render the WHERE clause, joining conditions with AND."""
    sql = ""
    if items:
        conditions = f"{fmts.space}{fmts.lb}{fmts.indent}AND{fmts.space}".join(items)
        sql = f"WHERE{fmts.space}{conditions}{fmts.space}{fmts.lb}"
    return concat_raw_before_after(items_before, items_after, query, fmts, clause, sql)


def concat_with(
    items_before: Sequence[RawItem],
    items_after: Sequence[RawItem],
    query: str,
    fmts: Formatter,
    clause: Enum,
    items: Sequence[Tuple[str, "QueryBuilder"]],
) -> str:
    """Render the WITH clause from named sub-queries."""
    sql = ""
    if items:
        space, lb, indent = fmts.space, fmts.lb, fmts.indent
        inner_fmts = dataclasses.replace(fmts, lb=f"{lb}{indent}")
        parts = [
            f"{name}{space}AS{space}({lb}{indent}{sub_query.concat(inner_fmts)}{lb})"
            for name, sub_query in items
        ]
        with_sql = f"{fmts.comma}{lb}".join(parts)
        sql = f"WITH{space}{lb}{with_sql}{space}{lb}"
    return concat_raw_before_after(items_before, items_after, query, fmts, clause, sql)


class QueryBuilder(ABC):
    """Base of all builders: raw SQL storage, rendering and printing."""

    def __init__(self) -> None:
        self._raw: list[str] = []
        self._raw_before: list[RawItem] = []
        self._raw_after: list[RawItem] = []

    @abstractmethod
    def concat(self, fmts: Formatter) -> str:
        """Render the query with the given formatter."""

    def as_string(self) -> str:
        """Render the query on one line."""
        return self.concat(one_line())

    def debug(self: B) -> B:
        """Print the query in a readable multi-line form and return the builder."""
        fmts = multiline()
        builtins.print(format_query(self.concat(fmts), fmts))
        return self

    def print(self: B) -> B:
        """Print the query on one line and return the builder."""
        fmts = one_line()
        builtins.print(format_query(self.concat(fmts), fmts))
        return self

    def copy(self: B) -> B:
        """Return an independent copy of the builder."""
        return _copy.deepcopy(self)

    def _add_raw(self, raw_sql: str) -> None:
        push_unique(self._raw, raw_sql.strip())

    def _add_raw_before(self, clause: Enum, raw_sql: str) -> None:
        self._raw_before.append((clause, raw_sql.strip()))

    def _add_raw_after(self, clause: Enum, raw_sql: str) -> None:
        self._raw_after.append((clause, raw_sql.strip()))

    def _concat_clause(self, query: str, fmts: Formatter, clause: Enum, sql: str) -> str:
        return concat_raw_before_after(self._raw_before, self._raw_after, query, fmts, clause, sql)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_string()!r})"