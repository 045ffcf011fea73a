"""Compacting SQL by dropping comments and every unnecessary space."""

from __future__ import annotations

from collections.abc import Iterator

from .base import Transformer, TransformerCategory

_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")
_SEPARATORS = frozenset("(),;=<>!+-*/")
_OPERATORS = frozenset("=<>!+*/")

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


def _skip_line_comment(chars: _Chars) -> None:
    for c in chars:
        if c == "\n":
            return


def _skip_block_comment(chars: _Chars) -> None:
    asterisk_seen = False
    for c in chars:
        if asterisk_seen and c == "/":
            return
        asterisk_seen = c == "*"


def minify_sql(text: str) -> str:
    """Strip comments and whitespace from ``text``, keeping string literals intact.

    Keywords are upper-cased and separated from neighbouring words by one space.
    """
    if all(_is_whitespace(c) for c in text):
        return ""

    chars = _Chars(text)
    out: list[str] = []
    in_string = False
    quote = '"'
    last_char = "\0"
    last_was_keyword = False

    for c in chars:
        if c in "'\"":
            if not in_string:
                in_string = True
                quote = c
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
            last_char = c
            continue

        if in_string:
            out.append(c)
            last_char = c
            continue

        if c == "-" and chars.peek() == "-":
            next(chars)
            _skip_line_comment(chars)
            continue

        if c == "/" and chars.peek() == "*":
            next(chars)
            _skip_block_comment(chars)
            continue

        if _is_whitespace(c):
            continue

        if c.isalpha() or c == "_":
            word = [c]
            while (nxt := chars.peek()) is not None and (nxt.isalnum() or nxt == "_"):
                word.append(next(chars))
            current = "".join(word)
            upper = current.upper()
            is_keyword = upper in SQL_KEYWORDS

            if (is_keyword or last_was_keyword) and out and last_char not in _SEPARATORS:
                out.append(" ")

            out.append(upper if is_keyword else current)
            last_was_keyword = is_keyword
            last_char = current[-1]
            continue

        if c in _SEPARATORS:
            out.append(c)
            if c in _OPERATORS and chars.peek() == "=":
                out.append(next(chars))
            last_was_keyword = False
            last_char = c
            continue

        out.append(c)
        last_was_keyword = False
        last_char = c

    return "".join(out)


class SqlMinifier(Transformer):
    """Minifies SQL queries by removing whitespace and comments."""

    name = "SQL Minifier"
    id = "sqlminifier"
    description = "Minifies SQL queries by removing unnecessary whitespace and formatting"
    category = TransformerCategory.FORMATTER
    default_test_input = (
        "SELECT id, username, email\n"
        "FROM users\n"
        "WHERE status = 'active'\n"
        "  AND created_at > '2023-01-01'\n"
        "ORDER BY created_at DESC\n"
        "LIMIT 10"
    )

    def transform(self, text: str) -> str:
        return minify_sql(text)