"""Pretty-printing of SQL queries with line breaks and indentation."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from .base import Transformer, TransformerCategory

_INDENT = "    "
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")
_OPERATORS = frozenset("+-*/=%<>!|&")
_IDENTIFIER_EXTRA = frozenset("_@#$")

NEWLINE_KEYWORDS = frozenset(
    {
        "FROM",
        "WHERE",
        "LEFT JOIN",
        "RIGHT JOIN",
        "INNER JOIN",
        "OUTER JOIN",
        "FULL JOIN",
        "CROSS JOIN",
        "JOIN",
        "GROUP BY",
        "HAVING",
        "ORDER BY",
        "LIMIT",
        "UNION",
        "UNION ALL",
        "INTERSECT",
    }
)

MAJOR_KEYWORDS = frozenset(
    {"SELECT", "INSERT", "UPDATE", "DELETE", "CREATE", "ALTER", "DROP"}
)

SQL_KEYWORDS = frozenset(
    {
        "SELECT", "FROM", "WHERE", "INSERT", "UPDATE", "DELETE", "DROP", "CREATE",
        "ALTER", "TABLE", "VIEW", "INDEX", "TRIGGER", "PROCEDURE", "FUNCTION",
        "DATABASE", "SCHEMA", "GRANT", "REVOKE", "JOIN", "INNER", "OUTER", "LEFT",
        "RIGHT", "FULL", "CROSS", "NATURAL", "GROUP", "ORDER", "BY", "HAVING",
        "UNION", "ALL", "INTERSECT", "EXCEPT", "INTO", "VALUES", "SET", "AS", "ON",
        "AND", "OR", "NOT", "NULL", "IS", "IN", "BETWEEN", "LIKE", "EXISTS", "CASE",
        "WHEN", "THEN", "ELSE", "END", "ASC", "DESC", "LIMIT", "OFFSET", "WITH",
    }
)


class _Token(enum.Enum):
    KEYWORD = enum.auto()
    IDENTIFIER = enum.auto()
    STRING = enum.auto()
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    PUNCTUATION = enum.auto()
    WHITESPACE = enum.auto()
    PARENTHESIS = enum.auto()


class _Chars(Iterator[str]):
    """Character iterator with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self._it = iter(text)
        self._ahead: list[str] = []

    def __next__(self) -> str:
        if self._ahead:
            return self._ahead.pop()
        return next(self._it)

    def peek(self) -> str | None:
        if not self._ahead:
            nxt = next(self._it, None)
            if nxt is None:
                return None
            self._ahead.append(nxt)
        return self._ahead[-1]


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def _is_identifier_start(char: str) -> bool:
    return char.isalpha() or char in _IDENTIFIER_EXTRA


def _is_identifier_char(char: str) -> bool:
    return char.isalnum() or char in _IDENTIFIER_EXTRA


def format_sql(text: str) -> str:
    """Lay out ``text`` with one clause per line and indented parentheses."""
    if all(_is_whitespace(c) for c in text):
        return ""

    chars = _Chars(text)
    out: list[str] = []
    indent = 0
    at_bol = True
    prev = _Token.WHITESPACE
    in_string = False
    quote = '"'
    in_comment = False
    in_block_comment = False
    pending_space = False

    for c in chars:
        if c in "'\"" and not in_comment and not in_block_comment:
            if not in_string:
                in_string = True
                quote = c
                if prev not in (_Token.WHITESPACE, _Token.OPERATOR, _Token.PARENTHESIS):
                    out.append(" ")
                out.append(c)
            elif c == quote:
                if chars.peek() == c:
                    next(chars)
                    out.append(c + c)
                else:
                    in_string = False
                    out.append(c)
            else:
                out.append(c)
            prev = _Token.STRING
            continue

        if in_string:
            out.append(c)
            continue

        if c == "-" and chars.peek() == "-" and not in_block_comment:
            in_comment = True
            if not at_bol:
                out.append(" ")
            out.append(c)
            continue

        if in_comment:
            out.append(c)
            if c == "\n":
                in_comment = False
                at_bol = True
                out.append(_INDENT * indent)
            continue

        if c == "/" and chars.peek() == "*":
            in_block_comment = True
            if not at_bol:
                out.append(" ")
            out.append(c)
            continue

        if in_block_comment:
            out.append(c)
            if c == "*" and chars.peek() == "/":
                next(chars)
                out.append("/")
                in_block_comment = False
            continue

        if _is_whitespace(c):
            if at_bol and c != "\n":
                continue
            if c == "\n":
                if not at_bol:
                    out.append("\n")
                    at_bol = True
                    out.append(_INDENT * indent)
            elif not at_bol:
                pending_space = True
            prev = _Token.WHITESPACE
            continue

        if c == "(":
            if pending_space and not at_bol:
                out.append(" ")
            pending_space = False
            indent += 1
            out.append("(\n" + _INDENT * indent)
            at_bol = True
            prev = _Token.PARENTHESIS
            continue

        if c == ")":
            pending_space = False
            if not at_bol:
                out.append("\n")
            indent = max(indent - 1, 0)
            if at_bol:
                joined = "".join(out)
                out = [joined[: joined.rfind("\n") + 1]]
            out.append(_INDENT * indent + ")")
            prev = _Token.PARENTHESIS
            at_bol = False
            continue

        if c == ",":
            out.append(",\n" + _INDENT * indent)
            at_bol = True
            prev = _Token.PUNCTUATION
            continue

        if c in _OPERATORS:
            if pending_space:
                out.append(" ")
            pending_space = False
            out.append(c)
            if chars.peek() not in ("=", ">", "<"):
                out.append(" ")
            prev = _Token.OPERATOR
            at_bol = False
            continue

        if _is_identifier_start(c):
            word = [c]
            while (nxt := chars.peek()) is not None and _is_identifier_char(nxt):
                word.append(next(chars))
            buffer = "".join(word)
            upper = buffer.upper()

            if upper in SQL_KEYWORDS:
                needs_newline = upper in NEWLINE_KEYWORDS or (
                    upper in MAJOR_KEYWORDS and not at_bol
                )
                if needs_newline and not at_bol:
                    out.append("\n" + _INDENT * indent)
                elif pending_space and not at_bol:
                    out.append(" ")
                pending_space = False
                out.append(upper + " ")
                prev = _Token.KEYWORD
            else:
                if pending_space and not at_bol:
                    out.append(" ")
                pending_space = False
                out.append(buffer)
                prev = _Token.IDENTIFIER
            at_bol = False
            continue

        nxt = chars.peek()
        if c.isnumeric() or (c == "." and nxt is not None and nxt.isnumeric()):
            if pending_space and not at_bol:
                out.append(" ")
            pending_space = False
            out.append(c)
            while (nxt := chars.peek()) is not None and (nxt.isnumeric() or nxt == "."):
                out.append(next(chars))
            prev = _Token.NUMBER
            at_bol = False
            continue

        if pending_space and not at_bol:
            out.append(" ")
        pending_space = False
        out.append(c)
        at_bol = False
        prev = _Token.PUNCTUATION

    return "".join(out)


class SqlFormatter(Transformer):
    """Formats SQL queries with line breaks and indentation."""

    name = "SQL Formatter"
    id = "sqlformatter"
    description = "Formats SQL queries with proper indentation and spacing"
    category = TransformerCategory.FORMATTER
    default_test_input = (
        "SELECT id, username, email FROM users WHERE status = 'active' "
        "AND created_at > '2023-01-01' ORDER BY created_at DESC LIMIT 10"
    )

    def transform(self, text: str) -> str:
        return format_sql(text)