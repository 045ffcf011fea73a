import pytest

from buup.base import (
    InvalidArgumentError,
    TextReverse,
    TransformError,
    Transformer,
    TransformerCategory,
)


def test_text_reverse():
    transformer = TextReverse()
    assert transformer.transform(transformer.default_test_input) == "!dlroW ,olleH"
    assert transformer.transform("") == ""
    assert transformer.transform("a") == "a"
    assert transformer.transform("ab") == "ba"


def test_text_reverse_is_an_involution():
    transformer = TextReverse()
    text = "Héllö, wörld! 123"
    assert transformer.transform(transformer.transform(text)) == text


def test_text_reverse_metadata_and_category():
    transformer = TextReverse()
    assert transformer.id == "textreverse"
    assert transformer.category is TransformerCategory.OTHER
    assert transformer.transform("xyz") == "zyx"


def test_transformer_is_abstract():
    with pytest.raises(TypeError):
        Transformer()


def test_invalid_argument_caught_as_transform_error():
    error = InvalidArgumentError("bad input: x")
    with pytest.raises(TransformError, match="bad input: x") as excinfo:
        raise error
    assert excinfo.value is error
    assert str(excinfo.value) == "bad input: x"


def test_transformers_compare_by_type():
    assert TextReverse() == TextReverse()
    assert len({TextReverse(), TextReverse()}) == 1