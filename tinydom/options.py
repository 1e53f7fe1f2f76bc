"""Command line options of the updater."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass
class Options:
    """Settings taken from the updater's command line."""

    actions_file: str = ""
    window_name: str = ""
    exe_name: str = ""
    copy_from: str = ""
    copy_to: str = ""
    is_admin: bool = False
    args: list[str] = field(default_factory=list)


class _Mode(Enum):
    START = auto()
    STANDARD = auto()
    QUOTED = auto()


def split_command_line(command_line: str | None) -> list[str]:
    """Split a command line on spaces, honouring double-quoted arguments.

    A quote only opens an argument at its start; a closing quote always
    ends one, even an empty one.
    """
    if not command_line:
        return []
    args: list[str] = []
    current: list[str] = []
    mode = _Mode.START
    for ch in command_line:
        if mode is _Mode.START:
            if ch == '"':
                mode = _Mode.QUOTED
            elif ch != " ":
                current.append(ch)
                mode = _Mode.STANDARD
        elif mode is _Mode.STANDARD:
            if ch == " ":
                args.append("".join(current))
                current = []
                mode = _Mode.START
            else:
                current.append(ch)
        else:
            if ch == '"':
                args.append("".join(current))
                current = []
                mode = _Mode.START
            else:
                current.append(ch)
    if current:
        args.append("".join(current))
    return args


_VALUE_FLAGS = {
    "-w": "window_name",
    "-e": "exe_name",
    "-a": "actions_file",
    "-c": "copy_from",
    "-t": "copy_to",
}


def parse_command_line(command_line: str | Iterable[str] | None) -> Options:
    """Build Options from a command line string or a list of arguments."""
    options = Options()
    if command_line is None:
        return options
    if isinstance(command_line, str):
        args = split_command_line(command_line)
    else:
        args = list(command_line)
    options.args = list(args)
    remaining = iter(args)
    for arg in remaining:
        if arg in _VALUE_FLAGS:
            value = next(remaining, None)
            if value is not None:
                setattr(options, _VALUE_FLAGS[arg], value)
        elif arg == "-M":
            options.is_admin = True
    return options