"""Dry-run chat transport: prints replies instead of sending them."""

from __future__ import annotations

import sys
import uuid
from dataclasses import dataclass
from typing import Optional, TextIO

from mostlybot.adapters.chat_api import ChatApiError


@dataclass(frozen=True)
class SentMessage:
    message_id: str
    text: str
    reply_parent_message_id: Optional[str]


class ConsoleChatApi:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self.sent: list[SentMessage] = []

    def send_chat_message(self, text: str, reply_parent_message_id: Optional[str] = None) -> str:
        prefix = f"[reply {reply_parent_message_id}] " if reply_parent_message_id else ""
        try:
            self._out.write(f"{prefix}{text}\n")
            self._out.flush()
        except OSError as exc:
            raise ChatApiError(f"console output failed: {exc}") from exc

        message_id = uuid.uuid4().hex
        self.sent.append(SentMessage(message_id=message_id, text=text, reply_parent_message_id=reply_parent_message_id))
        return message_id
