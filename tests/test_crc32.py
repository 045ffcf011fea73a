import pytest

from buup.crc32 import crc32


def test_crc32_empty():
    assert crc32(b"") == 0x00000000


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"The quick brown fox jumps over the lazy dog", 0x414FA339),
        (b"hello", 0x3610A686),
        (b"123456789", 0xCBF43926),
        (b"Valid data", 0x5BE1F96B),
    ],
)
def test_crc32_known_values(data, expected):
    assert crc32(data) == expected


def test_crc32_is_unsigned_32_bit():
    value = crc32(b"\xff" * 100)
    assert 0 <= value <= 0xFFFFFFFF