"""Low-level scanning helpers shared by the parser and the writers.

Positions are indexes into the text being scanned; a position equal to
the length of the text is the end of input.  Functions that can fail
return None instead of a position.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

ENTITIES: tuple[tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
)

_ESCAPES = {char: ref for ref, char in ENTITIES}
_WHITESPACE = frozenset(" \t\n\v\f\r")
_HEX_VALUE = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_MAX_HEX_REFERENCE = 3 + 4

_condense_whitespace = True


def set_condense_whitespace(condense: bool) -> None:
    """Choose whether runs of white space in text are condensed to one space."""
    global _condense_whitespace
    _condense_whitespace = bool(condense)


def is_whitespace_condensed() -> bool:
    """Return the current white space setting."""
    return _condense_whitespace


def is_whitespace(ch: str) -> bool:
    """True for a single white space character."""
    return ch in _WHITESPACE


@dataclass
class Cursor:
    """A 0-based row and column; -1 means unknown."""

    row: int = -1
    col: int = -1

    def clear(self) -> None:
        self.row = -1
        self.col = -1


class ParsingData:
    """Tracks the row and column of positions in a text as parsing advances."""

    def __init__(self, text: str, start: int, tabsize: int, row: int, col: int) -> None:
        self.text = text
        self.tabsize = tabsize
        self.cursor = Cursor(row, col)
        self._stamp = start

    def stamp(self, pos: int) -> None:
        """Advance the cursor from the last stamped position up to pos."""
        if self.tabsize < 1:
            return
        text = self.text
        end = len(text)
        row, col = self.cursor.row, self.cursor.col
        p = self._stamp
        while p < pos:
            if p >= end:
                # Never move past the end of the input.
                return
            ch = text[p]
            p += 1
            if ch == "\r":
                row += 1
                col = 0
                if p < end and text[p] == "\n":
                    p += 1
            elif ch == "\n":
                row += 1
                col = 0
                if p < end and text[p] == "\r":
                    p += 1
            elif ch == "\t":
                col = (col // self.tabsize + 1) * self.tabsize
            else:
                col += 1
        self.cursor.row = row
        self.cursor.col = col
        self._stamp = p


def escape(text: str) -> str:
    """Replace markup characters and non-printable characters by references.

    Hexadecimal character references already present are passed through.
    """
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        c = text[i]
        if c == "&" and i < length - 2 and text[i + 1] == "#" and text[i + 2] == "x":
            while i < length:
                out.append(text[i])
                i += 1
                if i < length and text[i] == ";":
                    break
            continue
        if c in _ESCAPES:
            out.append(_ESCAPES[c])
        elif ord(c) < 32 or ord(c) > 126:
            out.append(f"&#x{ord(c):04X};")
        else:
            out.append(c)
        i += 1
    return "".join(out)


def skip_whitespace(text: str, pos: int | None) -> int | None:
    """Return the first non-white position from pos; None if pos is at the end."""
    if pos is None or pos >= len(text):
        return None
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _is_name_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def _is_name_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_-.:"


def read_name(text: str, pos: int | None) -> tuple[str, int] | None:
    """Read an XML name at pos; return (name, position after it) or None."""
    if pos is None or pos >= len(text) or not _is_name_start(text[pos]):
        return None
    end = pos
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    return text[pos:end], end


def get_entity(text: str, pos: int) -> tuple[str, int]:
    """Decode the reference starting at pos; return (character, next position).

    An unrecognised reference yields its leading character unchanged.
    """
    if text.startswith("&#x", pos):
        end = text.find(";", pos + 3)
        if end != -1 and end - pos <= _MAX_HEX_REFERENCE:
            match = _HEX_VALUE.match(text, pos + 3)
            if match:
                value = int(match.group(2), 16)
                if match.group(1) == "-":
                    value = -value
                return chr(value & 0xFFFF), end + 1
    for reference, char in ENTITIES:
        if text.startswith(reference, pos):
            return char, pos + len(reference)
    return text[pos], pos + 1


def get_char(text: str, pos: int) -> tuple[str, int]:
    """Read one character at pos, decoding a reference if one starts there."""
    if text[pos] == "&":
        return get_entity(text, pos)
    return text[pos], pos + 1


def string_equal(text: str, pos: int | None, tag: str, ignore_case: bool) -> bool:
    """True if text at pos starts with tag.

    With ignore_case false the match is case-insensitive; with it true the
    match is exact.  Existing documents depend on this convention (end tags
    are matched without regard to case).
    """
    if pos is None or pos >= len(text) or not tag:
        return False
    if text[pos].lower() != tag[0].lower():
        return False
    segment = text[pos:pos + len(tag)]
    if len(segment) < len(tag):
        return False
    if ignore_case:
        return segment == tag
    return all(a.lower() == b.lower() for a, b in zip(segment, tag))


def read_text(
    text: str,
    pos: int | None,
    trim_whitespace: bool,
    end_tag: str,
    ignore_case: bool,
) -> tuple[str, int]:
    """Read text up to end_tag, decoding references.

    Returns the text and the position just past the end tag.  When
    trim_whitespace is set and white space condensing is on, leading white
    space is dropped and each inner run becomes one space.
    """
    length = len(text)
    if pos is None:
        pos = length
    chars: list[str] = []
    if not trim_whitespace or not _condense_whitespace:
        while pos < length and not string_equal(text, pos, end_tag, ignore_case):
            c, pos = get_char(text, pos)
            chars.append(c)
    else:
        skipped = skip_whitespace(text, pos)
        pos = length if skipped is None else skipped
        pending_space = False
        while pos < length and not string_equal(text, pos, end_tag, ignore_case):
            if text[pos] in _WHITESPACE:
                pending_space = True
                pos += 1
                continue
            if pending_space:
                chars.append(" ")
                pending_space = False
            c, pos = get_char(text, pos)
            chars.append(c)
    return "".join(chars), pos + len(end_tag)