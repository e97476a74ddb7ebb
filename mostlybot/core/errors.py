"""Dispatcher error taxonomy.

Every kind is recovered inside the dispatcher and, at most, turned into one
chat reply. None of them propagate to the consumption loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandError(RuntimeError):
    """Raised by a command handler to report a domain failure to the chatter."""


class ChatErrorKind(str, Enum):
    NOT_A_COMMAND = "NOT_A_COMMAND"
    INVALID_COMMAND = "INVALID_COMMAND"
    SPAM_DETECTED = "SPAM_DETECTED"
    COMMAND_DOES_NOT_EXIST = "COMMAND_DOES_NOT_EXIST"
    COMMAND_COOLDOWN = "COMMAND_COOLDOWN"
    HANDLER_ERROR = "HANDLER_ERROR"
    HANDLER_PANIC = "HANDLER_PANIC"


@dataclass(frozen=True)
class ChatError:
    kind: ChatErrorKind
    command: Optional[str] = None
    remaining_sec: Optional[float] = None
    detail: Optional[str] = None
