import pytest

from buup.base import TransformerCategory
from buup.xmlformat import XmlFormatter, format_xml

SAMPLE_INPUT = (
    '<?xml version="1.0" encoding="UTF-8"?><root><element attribute="value">text'
    "</element><empty-element/><nested><child>content</child></nested></root>"
)

SAMPLE_EXPECTED = """<?xml version="1.0" encoding="UTF-8"?>
<root>
    <element attribute="value">
        text
    </element>
    <empty-element/>
    <nested>
        <child>content</child>
    </nested>
</root>"""


@pytest.fixture
def transformer():
    return XmlFormatter()


def test_metadata(transformer):
    assert transformer.id == "xmlformatter"
    assert transformer.name == "XML Formatter"
    assert transformer.category is TransformerCategory.FORMATTER


def test_xml_formatter(transformer):
    assert transformer.transform(SAMPLE_INPUT) == SAMPLE_EXPECTED


def test_default_input(transformer):
    assert transformer.transform(transformer.default_test_input) == SAMPLE_EXPECTED


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_empty(text):
    assert format_xml(text) == ""


def test_nested_elements():
    assert format_xml("<a><b>x</b></a>") == "<a>\n  <b>x\n  </b>\n</a>"


def test_processing_instruction_on_own_line():
    assert format_xml('<?xml version="1.0"?><r/>') == '<?xml version="1.0"?>\n<r/>'


def test_quoted_angle_bracket_in_attribute():
    assert format_xml('<a t=">">x</a>') == '<a t=">">x\n</a>'


def test_single_self_closing_tag():
    assert format_xml("<empty/>") == "<empty/>"