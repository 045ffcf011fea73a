"""Plain-text transformers: ROT13, slugs, case conversion, stats and cleanup."""

from __future__ import annotations

from itertools import groupby

from .base import Transformer, TransformerCategory

_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")

_ROT13_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "nopqrstuvwxyzabcdefghijklmNOPQRSTUVWXYZABCDEFGHIJKLM",
)


def _is_whitespace(char: str) -> bool:
    """Unicode White_Space test (``str.isspace`` minus the ASCII separators)."""
    return char.isspace() and char not in _NOT_WHITESPACE


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _ascii_upper(char: str) -> str:
    return char.upper() if char.isascii() else char


def _ascii_lower(char: str) -> str:
    return char.lower() if char.isascii() else char


def _lines(text: str) -> list[str]:
    """Split into lines on ``\\n``, dropping a trailing ``\\r`` and a final empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _word_count(text: str) -> int:
    return sum(not is_space for is_space, _ in groupby(text, key=_is_whitespace))


class Rot13(Transformer):
    """Applies the ROT13 substitution cipher to ASCII letters."""

    name = "Rot13"
    id = "rot13"
    description = "Applies the ROT13 substitution cipher to the input text."
    category = TransformerCategory.ENCODER
    default_test_input = "The quick brown fox jumps over the lazy dog"

    def transform(self, text: str) -> str:
        return text.translate(_ROT13_TABLE)


class Slugify(Transformer):
    """Turns text into a lowercase, dash-separated URL slug."""

    name = "Slugify"
    id = "slugify"
    description = (
        "Converts text into a URL-friendly slug (lowercase, dashes, removes special chars)"
    )
    category = TransformerCategory.OTHER
    default_test_input = "This is a Test String! 123?"

    def transform(self, text: str) -> str:
        pieces: list[str] = []
        last_was_dash = True
        for char in text:
            if _is_ascii_alnum(char):
                pieces.append(char.lower())
                last_was_dash = False
            elif _is_whitespace(char) or char in "-_":
                if not last_was_dash:
                    pieces.append("-")
                    last_was_dash = True
        slug = "".join(pieces)
        if slug.endswith("-") and len(slug) > 1:
            slug = slug[:-1]
        return "" if slug == "-" else slug


class SnakeToCamel(Transformer):
    """Converts snake_case identifiers to camelCase."""

    name = "Snake Case to CamelCase"
    id = "snaketocamel"
    description = "Converts snake_case to camelCase"
    category = TransformerCategory.OTHER
    default_test_input = "convert_this_snake_case_string"

    def transform(self, text: str) -> str:
        pieces: list[str] = []
        capitalize_next = False
        for index, char in enumerate(text):
            if char == "_":
                capitalize_next = True
            elif capitalize_next:
                pieces.append(_ascii_upper(char))
                capitalize_next = False
            elif index == 0:
                pieces.append(_ascii_lower(char))
            else:
                pieces.append(char)
        return "".join(pieces)


class TextStats(Transformer):
    """Reports line, word, character and sentence counts."""

    name = "Text Stats"
    id = "text_stats"
    description = "Calculates basic text statistics (lines, words, chars, sentences)"
    category = TransformerCategory.OTHER
    default_test_input = "Buup is great. Buup is fast! Is buup easy? Yes."

    def transform(self, text: str) -> str:
        lines = len(_lines(text))
        words = _word_count(text)
        chars = len(text)
        if text:
            sentences = max(1, sum(char in ".!?" for char in text))
        else:
            sentences = 0
        return (
            f"Lines: {lines}\nWords: {words}\n"
            f"Characters: {chars}\nSentences: {sentences}"
        )


class UniqueLines(Transformer):
    """Drops repeated lines, keeping the first occurrence of each."""

    name = "Unique Lines"
    id = "uniquelines"
    description = "Removes duplicate lines, preserving the order of first occurrence."
    category = TransformerCategory.OTHER
    default_test_input = "apple\nbanana\napple\norange\nbanana"

    def transform(self, text: str) -> str:
        return "\n".join(dict.fromkeys(_lines(text)))


class WhitespaceRemover(Transformer):
    """Removes every whitespace character."""

    name = "Whitespace Remover"
    id = "whitespaceremover"
    description = "Removes all whitespace (spaces, tabs, newlines) from the input text."
    category = TransformerCategory.OTHER
    default_test_input = "  Remove \t all \n whitespace  "

    def transform(self, text: str) -> str:
        return "".join(char for char in text if not _is_whitespace(char))