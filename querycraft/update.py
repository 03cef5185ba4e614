"""Builder for UPDATE statements."""

from __future__ import annotations

from .behavior import (
    QueryBuilder,
    concat_from,
    concat_raw,
    concat_returning,
    concat_where,
    concat_with,
    push_unique,
)
from .clauses import UpdateClause
from .formatting import Formatter

__all__ = ["Update"]


class Update(QueryBuilder):
    """Builds an UPDATE statement clause by clause; every method returns the builder."""

    def __init__(self) -> None:
        super().__init__()
        self._update = ""
        self._set: list[str] = []
        self._from: list[str] = []
        self._where: list[str] = []
        self._returning: list[str] = []
        self._with: list[tuple[str, QueryBuilder]] = []

    def and_(self, condition: str) -> Update:
        """Alias of :meth:`where_clause`."""
        return self.where_clause(condition)

    def from_(self, tables: str) -> Update:
        """Add tables to the FROM clause."""
        push_unique(self._from, tables.strip())
        return self

    def raw(self, raw_sql: str) -> Update:
        """Add raw SQL at the beginning of the query."""
        self._add_raw(raw_sql)
        return self

    def raw_after(self, clause: UpdateClause, raw_sql: str) -> Update:
        """Add raw SQL right after ``clause``."""
        self._add_raw_after(clause, raw_sql)
        return self

    def raw_before(self, clause: UpdateClause, raw_sql: str) -> Update:
        """Add raw SQL right before ``clause``."""
        self._add_raw_before(clause, raw_sql)
        return self

    def returning(self, output_name: str) -> Update:
        """Add an output expression to the RETURNING clause."""
        push_unique(self._returning, output_name.strip())
        return self

    def set(self, value: str) -> Update:
        """Add an assignment to the SET clause."""
        push_unique(self._set, value.strip())
        return self

    def update(self, table_name: str) -> Update:
        """Set the table to update, replacing any previous value."""
        self._update = table_name.strip()
        return self

    def where_clause(self, condition: str) -> Update:
        """Add a condition to the WHERE clause."""
        push_unique(self._where, condition.strip())
        return self

    def with_(self, name: str, query: QueryBuilder) -> Update:
        """Add a named sub-query to the WITH clause."""
        self._with.append((name.strip(), query))
        return self

    def concat(self, fmts: Formatter) -> str:
        """Render the statement with the given formatter."""
        before, after = self._raw_before, self._raw_after
        query = concat_raw("", fmts, self._raw)
        query = concat_with(before, after, query, fmts, UpdateClause.WITH, self._with)
        query = self._concat_update(query, fmts)
        query = self._concat_set(query, fmts)
        query = concat_from(before, after, query, fmts, UpdateClause.FROM, self._from)
        query = concat_where(before, after, query, fmts, UpdateClause.WHERE, self._where)
        query = concat_returning(before, after, query, fmts, UpdateClause.RETURNING, self._returning)
        return query.rstrip()

    def _concat_update(self, query: str, fmts: Formatter) -> str:
        sql = ""
        if self._update:
            sql = f"UPDATE{fmts.space}{self._update}{fmts.space}{fmts.lb}"
        return self._concat_clause(query, fmts, UpdateClause.UPDATE, sql)

    def _concat_set(self, query: str, fmts: Formatter) -> str:
        sql = ""
        if self._set:
            sql = f"SET{fmts.space}{fmts.comma.join(self._set)}{fmts.space}{fmts.lb}"
        return self._concat_clause(query, fmts, UpdateClause.SET, sql)