"""Core types shared by every transformer: categories, errors and the base class."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import ClassVar


class TransformerCategory(enum.Enum):
    """Broad grouping used to organise transformers."""

    ENCODER = "encoder"
    DECODER = "decoder"
    FORMATTER = "formatter"
    CRYPTO = "crypto"
    COMPRESSION = "compression"
    COLOR = "color"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class TransformError(Exception):
    """Base class for every failure a transformer can report."""


class InvalidArgumentError(TransformError, ValueError):
    """The input does not have the shape the transformer expects."""


class UrlDecodeError(TransformError, ValueError):
    """The input is not valid URL-encoded text."""

    def __init__(self, message: str = "Invalid URL-encoded input") -> None:
        super().__init__(message)


class HexDecodeError(TransformError, ValueError):
    """The input is not valid hexadecimal text."""


class Transformer(ABC):
    """A named, categorised text-to-text transformation."""

    name: ClassVar[str]
    id: ClassVar[str]
    description: ClassVar[str]
    category: ClassVar[TransformerCategory]
    default_test_input: ClassVar[str] = ""

    @abstractmethod
    def transform(self, text: str) -> str:
        """Transform ``text``, raising :class:`TransformError` on failure."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class TextReverse(Transformer):
    """Reverses the characters of the input."""

    name = "Text Reverse"
    id = "textreverse"
    description = "Reverses the input text"
    category = TransformerCategory.OTHER
    default_test_input = "Hello, World!"

    def transform(self, text: str) -> str:
        return text[::-1]