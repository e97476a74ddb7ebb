"""Chat text to command classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_PREFIX = "!"


class ParseKind(str, Enum):
    NOT_A_COMMAND = "NOT_A_COMMAND"
    INVALID_SYNTAX = "INVALID_SYNTAX"
    VALID = "VALID"


@dataclass(frozen=True)
class ParsedCommand:
    kind: ParseKind
    name: str = ""
    args: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.kind is ParseKind.VALID


NOT_A_COMMAND = ParsedCommand(kind=ParseKind.NOT_A_COMMAND)
INVALID_SYNTAX = ParsedCommand(kind=ParseKind.INVALID_SYNTAX)


def is_valid_command_name(name: str) -> bool:
    return bool(name) and all(c.isalnum() or c == "_" for c in name)


def parse_command(text: str, prefix: str = DEFAULT_PREFIX) -> ParsedCommand:
    trimmed = (text or "").strip()
    if not trimmed or not trimmed.startswith(prefix):
        return NOT_A_COMMAND

    first, *rest = trimmed.split()
    # "!!ping" still names ping: every leading prefix char is dropped
    name = first.lstrip(prefix)
    if not is_valid_command_name(name):
        return INVALID_SYNTAX

    return ParsedCommand(kind=ParseKind.VALID, name=name, args=tuple(rest))
