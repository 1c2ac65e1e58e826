"""Parsed dice specification and the errors every parser raises.

All three parsing strategies produce the same ``Specification`` value and
fail with the same two error kinds, so their outputs can be compared
directly.
"""

from __future__ import annotations

from dataclasses import dataclass

U8_MAX = 255


class SpecificationError(ValueError):
    """Base class for dice notation parse failures."""

    kind: str = "error"

    def __init__(self, message: str, notation: str | None = None) -> None:
        super().__init__(message)
        self.notation = notation

    def __reduce__(self):
        return type(self), (str(self), self.notation)


class InvalidSpecificationError(SpecificationError):
    """Raised when the notation does not have the shape ``[count]d size[+modifier]``."""

    kind = "invalid"


class NumericFormatError(SpecificationError):
    """Raised when a digits segment cannot be converted into the 0-255 range.

    The low-level conversion failure is kept as ``__cause__``.
    """

    kind = "numeric_format"

    def __init__(self, text: str, notation: str | None = None) -> None:
        super().__init__(f"Invalid number in dice notation: {text!r}", notation)
        self.text = text

    def __reduce__(self):
        return type(self), (self.text, self.notation)

    @property
    def reason(self) -> str:
        return str(self.__cause__) if self.__cause__ is not None else ""


class GrammarShapeError(RuntimeError):
    """Raised when a parse tree does not have the shape the grammar promises."""


@dataclass(frozen=True)
class Specification:
    count: int
    size: int
    modifier: int = 0

    def __str__(self) -> str:
        text = f"{self.count}d{self.size}"
        if self.modifier:
            text += f"+{self.modifier}"
        return text


def _to_u8(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not (text.isascii() and text.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > U8_MAX:
        raise ValueError(f"number too large to fit in 0..{U8_MAX}")
    return value


def parse_u8(text: str, notation: str | None = None) -> int:
    """Convert a run of ASCII digits into an int in 0-255.

    Raises:
        NumericFormatError: If ``text`` is empty, holds a non-digit or is above 255.
    """
    try:
        return _to_u8(text)
    except ValueError as exc:
        raise NumericFormatError(text, notation) from exc
