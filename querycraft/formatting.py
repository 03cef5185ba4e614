"""Output formats for rendered queries and ANSI colouring of SQL text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

__all__ = ["Formatter", "one_line", "multiline", "colorize", "format_query"]


@dataclass(frozen=True)
class Formatter:
    """Separators used while rendering a query."""

    comma: str
    hr: str
    indent: str
    lb: str
    space: str


def one_line() -> Formatter:
    """Formatter that renders a query on a single line."""
    return Formatter(comma=", ", hr="", indent="", lb="", space=" ")


def multiline() -> Formatter:
    """Formatter that renders one clause per line, framed by rules."""
    return Formatter(
        comma=", ",
        hr="-- ------------------------------------------------------------------------------\x1b[0m",
        indent="  ",
        lb="\n",
        space=" ",
    )


def _blue(text: str) -> str:
    return f"\x1b[34;1m{text}\x1b[0m"


def _bold(text: str) -> str:
    return f"\x1b[0;1m{text}\x1b[0m"


def _comment_start(text: str) -> str:
    return f"\x1b[32;2m{text}"


def _comment_end(text: str) -> str:
    return f"\x1b[32;2m{text}\x1b[0m"


_SQL_SYNTAX: tuple[tuple[Callable[[str], str], str, str], ...] = (
    (_blue, "AND ", "and "),
    (_blue, "CROSS ", "cross "),
    (_blue, "DELETE ", "delete "),
    (_blue, "EXCEPT ", "except "),
    (_blue, "FROM ", "from "),
    (_blue, "FULL ", "full "),
    (_blue, "GROUP ", "group "),
    (_blue, "HAVING ", "having "),
    (_blue, "INNER ", "inner "),
    (_blue, "INSERT ", "insert "),
    (_blue, "INTERSECT ", "intersect "),
    (_blue, "INTO ", "into "),
    (_blue, "JOIN ", "join "),
    (_blue, "LEFT ", "left "),
    (_blue, "LIMIT ", "limit "),
    (_blue, "OFFSET ", "offset "),
    (_blue, "ORDER ", "order "),
    (_blue, "OVERRIDING ", "overriding "),
    (_blue, "RETURNING ", "returning "),
    (_blue, "RIGHT ", "right "),
    (_blue, "SELECT ", "select "),
    (_blue, "SET ", "set "),
    (_blue, "UNION ", "union "),
    (_blue, "UPDATE ", "update "),
    (_blue, "VALUES ", "values "),
    (_blue, "WHERE ", "where "),
    (_blue, "WITH ", "with "),
    (_blue, " ALL", " all"),
    (_blue, " ASC", " asc"),
    (_blue, " AS", " as"),
    (_blue, " BY", " by"),
    (_blue, " CONFLICT", " CONFLICT"),
    (_blue, " DESC", " desc"),
    (_blue, " DO", " do"),
    (_blue, " DISTINCT", " distinct"),
    (_blue, " FIRST", " first"),
    (_blue, " IN", " in"),
    (_blue, " LAST", " last"),
    (_blue, " NOTHING", " nothing"),
    (_blue, " ON", " on"),
    (_blue, " OR", " or"),
    (_blue, " OUTER", " OUTER"),
    (_blue, " USING", " using"),
    (_comment_start, "--", "--"),
    (_comment_start, "/*", "/*"),
    (_comment_end, "*/", "*/"),
)


def colorize(query: str) -> str:
    """Highlight SQL keywords, comments and the placeholders $1 to $10."""
    for color, upper, lower in _SQL_SYNTAX:
        query = query.replace(upper, color(upper)).replace(lower, color(lower))
    for index in range(1, 11):
        placeholder = f"${index}"
        query = query.replace(placeholder, _bold(placeholder))
    return query


def format_query(query: str, fmts: Formatter) -> str:
    """Frame a rendered query with the formatter's rules and colourize it."""
    lb, hr = fmts.lb, fmts.hr
    return colorize(f"{lb}{hr}{lb}{query}{lb}{hr}{lb}")