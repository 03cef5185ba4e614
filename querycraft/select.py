"""Builder for SELECT statements."""

from __future__ import annotations

from .behavior import (
    QueryBuilder,
    concat_from,
    concat_raw,
    concat_where,
    concat_with,
    push_unique,
    raw_queries,
)
from .clauses import Combinator, SelectClause
from .formatting import Formatter

__all__ = ["Select"]


class Select(QueryBuilder):
    """Builds a SELECT statement clause by clause; every method returns the builder."""

    def __init__(self) -> None:
        super().__init__()
        self._select: list[str] = []
        self._from: list[str] = []
        self._join: list[str] = []
        self._where: list[str] = []
        self._group_by: list[str] = []
        self._having: list[str] = []
        self._order_by: list[str] = []
        self._limit = ""
        self._offset = ""
        self._except: list[Select] = []
        self._intersect: list[Select] = []
        self._union: list[Select] = []
        self._with: list[tuple[str, QueryBuilder]] = []

    def and_(self, condition: str) -> Select:
        """Alias of :meth:`where_clause`."""
        return self.where_clause(condition)

    def except_(self, select: Select) -> Select:
        """Add a select combined with EXCEPT."""
        self._except.append(select)
        return self

    def from_(self, tables: str) -> Select:
        """Add tables to the FROM clause."""
        push_unique(self._from, tables.strip())
        return self

    def group_by(self, column: str) -> Select:
        """Add columns to the GROUP BY clause."""
        push_unique(self._group_by, column.strip())
        return self

    def having(self, condition: str) -> Select:
        """Add a condition to the HAVING clause."""
        push_unique(self._having, condition.strip())
        return self

    def _add_join(self, kind: str, table: str) -> Select:
        push_unique(self._join, f"{kind} JOIN {table.strip()}")
        return self

    def cross_join(self, table: str) -> Select:
        """Add a CROSS JOIN."""
        return self._add_join("CROSS", table)

    def inner_join(self, table: str) -> Select:
        """Add an INNER JOIN."""
        return self._add_join("INNER", table)

    def left_join(self, table: str) -> Select:
        """Add a LEFT JOIN."""
        return self._add_join("LEFT", table)

    def right_join(self, table: str) -> Select:
        """Add a RIGHT JOIN."""
        return self._add_join("RIGHT", table)

    def intersect(self, select: Select) -> Select:
        """Add a select combined with INTERSECT."""
        self._intersect.append(select)
        return self

    def limit(self, num: str) -> Select:
        """Set the LIMIT clause, replacing any previous value."""
        self._limit = num.strip()
        return self

    def offset(self, num: str) -> Select:
        """Set the OFFSET clause, replacing any previous value."""
        self._offset = num.strip()
        return self

    def order_by(self, column: str) -> Select:
        """Add columns to the ORDER BY clause."""
        push_unique(self._order_by, column.strip())
        return self

    def raw(self, raw_sql: str) -> Select:
        """Add raw SQL at the beginning of the query."""
        self._add_raw(raw_sql)
        return self

    def raw_after(self, clause: SelectClause, raw_sql: str) -> Select:
        """Add raw SQL right after ``clause``."""
        self._add_raw_after(clause, raw_sql)
        return self

    def raw_before(self, clause: SelectClause, raw_sql: str) -> Select:
        """Add raw SQL right before ``clause``."""
        self._add_raw_before(clause, raw_sql)
        return self

    def select(self, column: str) -> Select:
        """Add columns to the SELECT clause."""
        push_unique(self._select, column.strip())
        return self

    def union(self, select: Select) -> Select:
        """Add a select combined with UNION."""
        self._union.append(select)
        return self

    def where_clause(self, condition: str) -> Select:
        """Add a condition to the WHERE clause."""
        push_unique(self._where, condition.strip())
        return self

    def with_(self, name: str, query: QueryBuilder) -> Select:
        """Add a named sub-query to the WITH clause."""
        self._with.append((name.strip(), query))
        return self

    def concat(self, fmts: Formatter) -> str:
        """Render the statement with the given formatter."""
        query = concat_raw("", fmts, self._raw)
        query = concat_with(self._raw_before, self._raw_after, query, fmts, SelectClause.WITH, self._with)
        query = self._concat_list(query, fmts, SelectClause.SELECT, "SELECT", self._select)
        query = concat_from(self._raw_before, self._raw_after, query, fmts, SelectClause.FROM, self._from)
        query = self._concat_join(query, fmts)
        query = concat_where(self._raw_before, self._raw_after, query, fmts, SelectClause.WHERE, self._where)
        query = self._concat_list(query, fmts, SelectClause.GROUP_BY, "GROUP BY", self._group_by)
        query = self._concat_having(query, fmts)
        query = self._concat_list(query, fmts, SelectClause.ORDER_BY, "ORDER BY", self._order_by)
        query = self._concat_single(query, fmts, SelectClause.LIMIT, "LIMIT", self._limit)
        query = self._concat_single(query, fmts, SelectClause.OFFSET, "OFFSET", self._offset)
        for combinator in Combinator:
            query = self._concat_combinator(query, fmts, combinator)
        return query.rstrip()

    def _concat_list(self, query: str, fmts: Formatter, clause: SelectClause, keyword: str, items: list[str]) -> str:
        sql = f"{keyword}{fmts.space}{fmts.comma.join(items)}{fmts.space}{fmts.lb}" if items else ""
        return self._concat_clause(query, fmts, clause, sql)

    def _concat_single(self, query: str, fmts: Formatter, clause: SelectClause, keyword: str, value: str) -> str:
        sql = f"{keyword}{fmts.space}{value}{fmts.space}{fmts.lb}" if value else ""
        return self._concat_clause(query, fmts, clause, sql)

    def _concat_having(self, query: str, fmts: Formatter) -> str:
        sql = ""
        if self._having:
            sql = f"HAVING{fmts.space}{' AND '.join(self._having)}{fmts.space}{fmts.lb}"
        return self._concat_clause(query, fmts, SelectClause.HAVING, sql)

    def _concat_join(self, query: str, fmts: Formatter) -> str:
        sql = ""
        if self._join:
            joins = f"{fmts.space}{fmts.lb}".join(self._join)
            sql = f"{joins}{fmts.space}{fmts.lb}"
        return self._concat_clause(query, fmts, SelectClause.JOIN, sql)

    def _concat_combinator(self, query: str, fmts: Formatter, combinator: Combinator) -> str:
        clause, selects = {
            Combinator.EXCEPT: (SelectClause.EXCEPT, self._except),
            Combinator.INTERSECT: (SelectClause.INTERSECT, self._intersect),
            Combinator.UNION: (SelectClause.UNION, self._union),
        }[combinator]
        space, lb = fmts.space, fmts.lb
        raw_before = space.join(raw_queries(self._raw_before, clause))
        raw_after = space.join(raw_queries(self._raw_after, clause))
        space_after = space if raw_after else ""

        if not selects:
            space_before = space if raw_before else ""
            return f"{query}{raw_before}{space_before}{raw_after}{space_after}"

        right_stmt = "".join(
            f"{combinator.value}{space}({lb}{select.concat(fmts)}){space}{lb}" for select in selects
        )
        left_stmt = f"({query.rstrip()}{raw_before}){space}"
        return f"{left_stmt}{right_stmt}{raw_after}{space_after}"