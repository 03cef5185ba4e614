"""Builder for DELETE statements."""

from __future__ import annotations

from .behavior import (
    QueryBuilder,
    concat_raw,
    concat_returning,
    concat_where,
    concat_with,
    push_unique,
)
from .clauses import DeleteClause
from .formatting import Formatter

__all__ = ["Delete"]


class Delete(QueryBuilder):
    """Builds a DELETE statement clause by clause; every method returns the builder."""

    def __init__(self) -> None:
        super().__init__()
        self._delete_from = ""
        self._where: list[str] = []
        self._returning: list[str] = []
        self._with: list[tuple[str, QueryBuilder]] = []

    def and_(self, condition: str) -> Delete:
        """Alias of :meth:`where_clause`."""
        return self.where_clause(condition)

    def delete_from(self, table_name: str) -> Delete:
        """Set the table to delete from, replacing any previous value."""
        self._delete_from = table_name.strip()
        return self

    def raw(self, raw_sql: str) -> Delete:
        """Add raw SQL at the beginning of the query."""
        self._add_raw(raw_sql)
        return self

    def raw_after(self, clause: DeleteClause, raw_sql: str) -> Delete:
        """Add raw SQL right after ``clause``."""
        self._add_raw_after(clause, raw_sql)
        return self

    def raw_before(self, clause: DeleteClause, raw_sql: str) -> Delete:
        """Add raw SQL right before ``clause``."""
        self._add_raw_before(clause, raw_sql)
        return self

    def returning(self, output_name: str) -> Delete:
        """Add an output expression to the RETURNING clause."""
        push_unique(self._returning, output_name.strip())
        return self

    def where_clause(self, condition: str) -> Delete:
        """Add a condition to the WHERE clause."""
        push_unique(self._where, condition.strip())
        return self

    def with_(self, name: str, query: QueryBuilder) -> Delete:
        """Add a named sub-query to the WITH clause."""
        self._with.append((name.strip(), query))
        return self

    def concat(self, fmts: Formatter) -> str:
        """Render the statement with the given formatter."""
        before, after = self._raw_before, self._raw_after
        query = concat_raw("", fmts, self._raw)
        query = concat_with(before, after, query, fmts, DeleteClause.WITH, self._with)
        query = self._concat_delete_from(query, fmts)
        query = concat_where(before, after, query, fmts, DeleteClause.WHERE, self._where)
        query = concat_returning(before, after, query, fmts, DeleteClause.RETURNING, self._returning)
        return query.rstrip()

    def _concat_delete_from(self, query: str, fmts: Formatter) -> str:
        sql = ""
        if self._delete_from:
            sql = f"DELETE FROM{fmts.space}{self._delete_from}{fmts.space}{fmts.lb}"
        return self._concat_clause(query, fmts, DeleteClause.DELETE_FROM, sql)