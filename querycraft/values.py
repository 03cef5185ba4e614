"""Builder for VALUES statements."""

from __future__ import annotations

from .behavior import QueryBuilder, concat_raw, concat_values, push_unique
from .clauses import ValuesClause
from .formatting import Formatter

__all__ = ["Values"]


class Values(QueryBuilder):
    """Builds a standalone VALUES statement; every method returns the builder."""

    def __init__(self) -> None:
        super().__init__()
        self._values: list[str] = []

    def raw(self, raw_sql: str) -> Values:
        """Add raw SQL at the beginning of the query."""
        self._add_raw(raw_sql)
        return self

    def raw_after(self, clause: ValuesClause, raw_sql: str) -> Values:
        """Add raw SQL right after ``clause``."""
        self._add_raw_after(clause, raw_sql)
        return self

    def raw_before(self, clause: ValuesClause, raw_sql: str) -> Values:
        """Add raw SQL right before ``clause``."""
        self._add_raw_before(clause, raw_sql)
        return self

    def values(self, expression: str) -> Values:
        """Add a row expression to the VALUES clause."""
        push_unique(self._values, expression.strip())
        return self

    def concat(self, fmts: Formatter) -> str:
        """Render the statement with the given formatter."""
        query = concat_raw("", fmts, self._raw)
        query = concat_values(
            self._raw_before, self._raw_after, query, fmts, ValuesClause.VALUES, self._values
        )
        return query.rstrip()