"""Outbound chat interfaces."""

from __future__ import annotations

from typing import Optional, Protocol


class ChatApiError(RuntimeError):
    """Raised when a chat message could not be delivered."""


class ChatApi(Protocol):
    def send_chat_message(self, text: str, reply_parent_message_id: Optional[str] = None) -> str:
        """Send text to chat, threaded under the parent message when given; return the new message id."""
