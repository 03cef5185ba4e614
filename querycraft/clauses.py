"""Clause identifiers used to place raw SQL before or after a clause."""

from __future__ import annotations

from enum import Enum, auto

__all__ = [
    "Combinator",
    "DeleteClause",
    "InsertClause",
    "SelectClause",
    "UpdateClause",
    "ValuesClause",
]


class Combinator(Enum):
    """Set operators that join two select statements."""

    EXCEPT = "EXCEPT"
    INTERSECT = "INTERSECT"
    UNION = "UNION"


class DeleteClause(Enum):
    """Clauses of a delete statement."""

    DELETE_FROM = auto()
    WHERE = auto()
    RETURNING = auto()
    WITH = auto()


class InsertClause(Enum):
    """Clauses of an insert statement."""

    INSERT_INTO = auto()
    ON_CONFLICT = auto()
    OVERRIDING = auto()
    SELECT = auto()
    VALUES = auto()
    RETURNING = auto()
    WITH = auto()


class SelectClause(Enum):
    """Clauses of a select statement."""

    FROM = auto()
    GROUP_BY = auto()
    HAVING = auto()
    JOIN = auto()
    LIMIT = auto()
    OFFSET = auto()
    ORDER_BY = auto()
    SELECT = auto()
    WHERE = auto()
    EXCEPT = auto()
    INTERSECT = auto()
    UNION = auto()
    WITH = auto()


class UpdateClause(Enum):
    """Clauses of an update statement."""

    SET = auto()
    UPDATE = auto()
    WHERE = auto()
    FROM = auto()
    RETURNING = auto()
    WITH = auto()


class ValuesClause(Enum):
    """Clauses of a values statement."""

    VALUES = auto()