"""Name/value pairs attached to elements."""

from __future__ import annotations

import functools
import re
from typing import TextIO

from tinydom.text import Cursor, escape

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*("
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan)"
    r")",
    re.IGNORECASE,
)


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _leading_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else None


@functools.total_ordering
class Attribute:
    """An attribute: a name and a string value.

    Attributes compare equal when their names are equal and order by name.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, name: str = "", value: str = "") -> None:
        self.name = name
        self.value = value
        self.location = Cursor()

    @property
    def row(self) -> int:
        """1-based row in the source text; 0 or less when unknown."""
        return self.location.row + 1

    @property
    def column(self) -> int:
        """1-based column in the source text; 0 or less when unknown."""
        return self.location.col + 1

    def int_value(self) -> int:
        """The value read as a leading integer; 0 if there is none."""
        result = _leading_int(self.value)
        return 0 if result is None else result

    def double_value(self) -> float:
        """The value read as a leading number; 0.0 if there is none."""
        result = _leading_float(self.value)
        return 0.0 if result is None else result

    def query_int_value(self) -> int:
        """The value as an integer; ValueError if it does not start with one."""
        result = _leading_int(self.value)
        if result is None:
            raise ValueError(f"attribute {self.name!r} is not an integer: {self.value!r}")
        return result

    def query_double_value(self) -> float:
        """The value as a number; ValueError if it does not start with one."""
        result = _leading_float(self.value)
        if result is None:
            raise ValueError(f"attribute {self.name!r} is not a number: {self.value!r}")
        return result

    def set_int_value(self, value: int) -> None:
        self.value = str(int(value))

    def set_double_value(self, value: float) -> None:
        self.value = f"{float(value):f}"

    def write(self, stream: TextIO, depth: int = 0) -> None:
        """Write the attribute as name="value" to a text stream."""
        stream.write(self.to_xml())

    def to_xml(self) -> str:
        """Return the attribute as markup, quoted with ' if the value holds "."""
        quote = "'" if '"' in self.value else '"'
        return f"{escape(self.name)}={quote}{escape(self.value)}{quote}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name < other.name

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.value!r})"