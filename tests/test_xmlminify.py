import pytest

from buup.base import TransformerCategory
from buup.xmlminify import XmlMinifier, minify_xml

FORMATTED = """<?xml version="1.0" encoding="UTF-8"?>
<root>
    <element attribute="value">
        text
    </element>
    <empty-element/>
    <nested>
        <child>content</child>
    </nested>
</root>"""

MINIFIED = (
    '<?xml version="1.0" encoding="UTF-8"?><root><element attribute="value">text'
    "</element><empty-element/><nested><child>content</child></nested></root>"
)


def test_metadata():
    minifier = XmlMinifier()
    assert minifier.id == "xmlminifier"
    assert minifier.category is TransformerCategory.FORMATTER


def test_xml_minifier():
    assert XmlMinifier().transform(FORMATTED) == MINIFIED


def test_default_input():
    minifier = XmlMinifier()
    assert minifier.transform(minifier.default_test_input) == MINIFIED


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_blank_input(text):
    assert minify_xml(text) == ""


def test_trims_text_content():
    assert minify_xml("<a>  x  </a>") == "<a>x</a>"


def test_inner_spaces_of_text_are_kept():
    assert minify_xml("<a>  hello   world  </a>") == "<a>hello   world</a>"


def test_whitespace_between_elements_removed():
    assert minify_xml("<a>\n  <b/>\n</a>") == "<a><b/></a>"


def test_quoted_values_kept_verbatim():
    assert minify_xml("<a b='1 2'/>") == "<ab='1 2'/>"


def test_trailing_text():
    assert minify_xml("<a/> tail ") == "<a/>tail"