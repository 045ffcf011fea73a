import string

from buup.base import TransformerCategory
from buup.uuidgen import UuidGenerate

HEX = set(string.hexdigits.lower())


def test_format():
    value = UuidGenerate().transform("test")
    assert len(value) == 36
    assert [value[i] for i in (8, 13, 18, 23)] == ["-"] * 4
    assert value[14] == "4"
    assert value[19] in "89ab"
    assert all(c in HEX for i, c in enumerate(value) if i not in (8, 13, 18, 23))


def test_uniqueness_basic():
    transformer = UuidGenerate()
    generated = {transformer.transform(f"seed_{i}") for i in range(100)}
    assert len(generated) == 100


def test_every_result_is_version_four():
    transformer = UuidGenerate()
    values = [transformer.transform("") for _ in range(20)]
    assert all(v[14] == "4" and v[19] in "89ab" for v in values)


def test_metadata():
    transformer = UuidGenerate()
    assert transformer.id == "uuid_generate"
    assert transformer.category is TransformerCategory.OTHER
    assert transformer.default_test_input == ""