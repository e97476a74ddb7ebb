"""Inbound chat stream: one JSON document per line, in arrival order."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Iterator, Optional

from pydantic import ValidationError

from mostlybot.models.chat import ChatMessage

LOGGER = logging.getLogger(__name__)


def _unwrap_event(raw: Any) -> Optional[dict[str, Any]]:
    if not isinstance(raw, dict):
        return None
    # EventSub websocket/webhook envelopes carry the event one or two levels down.
    payload = raw.get("payload")
    if isinstance(payload, dict) and isinstance(payload.get("event"), dict):
        return payload["event"]
    if isinstance(raw.get("event"), dict):
        return raw["event"]
    return raw


def parse_chat_message(line: str) -> Optional[ChatMessage]:
    try:
        raw = json.loads(line)
    except json.JSONDecodeError:
        LOGGER.warning("skipping non-JSON chat line len=%s", len(line))
        return None

    event = _unwrap_event(raw)
    if event is None:
        LOGGER.warning("skipping chat line: root must be an object")
        return None

    try:
        return ChatMessage.model_validate(event)
    except ValidationError as exc:
        LOGGER.warning("skipping invalid chat message: %s", exc.errors()[0].get("msg", "invalid"))
        return None


def iter_chat_messages(lines: Iterable[str]) -> Iterator[ChatMessage]:
    for line in lines:
        text = line.strip()
        if not text:
            continue
        message = parse_chat_message(text)
        if message is not None:
            yield message
