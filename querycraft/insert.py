"""Builder for INSERT statements."""

from __future__ import annotations

from typing import Optional

from .behavior import (
    QueryBuilder,
    concat_raw,
    concat_returning,
    concat_values,
    concat_with,
    push_unique,
)
from .clauses import InsertClause
from .formatting import Formatter
from .select import Select

__all__ = ["Insert"]


class Insert(QueryBuilder):
    """Builds an INSERT statement clause by clause; every method returns the builder."""

    def __init__(self) -> None:
        super().__init__()
        self._insert_into = ""
        self._overriding = ""
        self._on_conflict = ""
        self._values: list[str] = []
        self._select: Optional[Select] = None
        self._returning: list[str] = []
        self._with: list[tuple[str, QueryBuilder]] = []

    def insert_into(self, table_name: str) -> Insert:
        """Set the target table, replacing any previous value."""
        self._insert_into = table_name.strip()
        return self

    def on_conflict(self, conflict: str) -> Insert:
        """Set the ON CONFLICT clause, replacing any previous value."""
        self._on_conflict = conflict.strip()
        return self

    def overriding(self, option: str) -> Insert:
        """Set the OVERRIDING clause, replacing any previous value."""
        self._overriding = option.strip()
        return self

    def select(self, select: Select) -> Insert:
        """Use a select as the source of rows, replacing any previous one."""
        self._select = select
        return self

    def raw(self, raw_sql: str) -> Insert:
        """Add raw SQL at the beginning of the query."""
        self._add_raw(raw_sql)
        return self

    def raw_after(self, clause: InsertClause, raw_sql: str) -> Insert:
        """Add raw SQL right after ``clause``."""
        self._add_raw_after(clause, raw_sql)
        return self

    def raw_before(self, clause: InsertClause, raw_sql: str) -> Insert:
        """Add raw SQL right before ``clause``."""
        self._add_raw_before(clause, raw_sql)
        return self

    def returning(self, output_name: str) -> Insert:
        """Add an output expression to the RETURNING clause."""
        push_unique(self._returning, output_name.strip())
        return self

    def values(self, value: str) -> Insert:
        """Add a row expression to the VALUES clause."""
        push_unique(self._values, value.strip())
        return self

    def with_(self, name: str, query: QueryBuilder) -> Insert:
        """Add a named sub-query to the WITH clause."""
        self._with.append((name.strip(), query))
        return self

    def concat(self, fmts: Formatter) -> str:
        """Render the statement with the given formatter."""
        before, after = self._raw_before, self._raw_after
        query = concat_raw("", fmts, self._raw)
        query = concat_with(before, after, query, fmts, InsertClause.WITH, self._with)
        query = self._concat_keyword(query, fmts, InsertClause.INSERT_INTO, "INSERT INTO", self._insert_into)
        query = self._concat_keyword(query, fmts, InsertClause.OVERRIDING, "OVERRIDING", self._overriding)
        query = concat_values(before, after, query, fmts, InsertClause.VALUES, self._values)
        query = self._concat_select(query, fmts)
        query = self._concat_keyword(query, fmts, InsertClause.ON_CONFLICT, "ON CONFLICT", self._on_conflict)
        query = concat_returning(before, after, query, fmts, InsertClause.RETURNING, self._returning)
        return query.rstrip()

    def _concat_keyword(
        self, query: str, fmts: Formatter, clause: InsertClause, keyword: str, value: str
    ) -> str:
        sql = f"{keyword}{fmts.space}{value}{fmts.space}{fmts.lb}" if value else ""
        return self._concat_clause(query, fmts, clause, sql)

    def _concat_select(self, query: str, fmts: Formatter) -> str:
        sql = ""
        if self._select is not None:
            sql = f"{self._select.concat(fmts)}{fmts.space}{fmts.lb}"
        return self._concat_clause(query, fmts, InsertClause.SELECT, sql)