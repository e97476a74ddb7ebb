"""Minimal Twitch Helix chat HTTP client (no external SDK dependency)."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from mostlybot.adapters.chat_api import ChatApiError

LOGGER = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.twitch.tv/helix"
MAX_MESSAGE_LENGTH = 500


class HelixChatApi:
    """Sends chat messages as the bot user through ``POST /chat/messages``."""

    def __init__(
        self,
        *,
        client_id: str,
        access_token: str,
        broadcaster_id: str,
        sender_id: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        timeout_seconds: int = 10,
        min_send_interval_sec: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client_id = client_id
        self._access_token = access_token
        self._broadcaster_id = broadcaster_id
        self._sender_id = sender_id
        self._url = api_base_url.rstrip("/") + "/chat/messages"
        self._timeout_seconds = timeout_seconds
        self._min_send_interval_sec = min_send_interval_sec
        self._clock = clock
        self._sleep = sleep
        self._last_sent_at: Optional[float] = None

    def send_chat_message(self, text: str, reply_parent_message_id: Optional[str] = None) -> str:
        message = (text or "").strip()
        if not message:
            raise ChatApiError("chat message must not be empty")
        # Helix rejects anything past 500 characters.
        message = message[:MAX_MESSAGE_LENGTH]

        body: dict[str, Any] = {
            "broadcaster_id": self._broadcaster_id,
            "sender_id": self._sender_id,
            "message": message,
        }
        if reply_parent_message_id:
            body["reply_parent_message_id"] = reply_parent_message_id

        self._pace()
        try:
            payload = self._post(body)
        finally:
            self._last_sent_at = self._clock()
        return _extract_message_id(payload)

    def _pace(self) -> None:
        if self._last_sent_at is None or self._min_send_interval_sec <= 0:
            return
        wait = self._min_send_interval_sec - (self._clock() - self._last_sent_at)
        if wait > 0:
            self._sleep(wait)

    def _post(self, body: dict[str, Any]) -> dict[str, Any]:
        req = Request(
            url=self._url,
            data=json.dumps(body, ensure_ascii=True).encode("utf-8"),
            method="POST",
            headers={
                "content-type": "application/json",
                "authorization": f"Bearer {self._access_token}",
                "client-id": self._client_id,
            },
        )

        try:
            with urlopen(req, timeout=self._timeout_seconds) as resp:
                raw = resp.read().decode("utf-8", errors="replace")
        except HTTPError as exc:
            raise ChatApiError(_describe_http_error(exc)) from exc
        except OSError as exc:
            # URLError, socket timeouts and resets all land here
            reason = getattr(exc, "reason", None) or exc
            raise ChatApiError(f"helix unreachable: {reason}") from exc

        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise ChatApiError(f"helix answered with invalid JSON ({len(raw)} bytes)") from exc
        if not isinstance(payload, dict):
            raise ChatApiError(f"helix answered with a JSON {type(payload).__name__}, expected an object")
        return payload


def _describe_http_error(exc: HTTPError) -> str:
    # Helix error bodies look like {"error": "Unauthorized", "status": 401, "message": "..."}
    try:
        body = json.loads(exc.read() or b"{}")
    except (OSError, ValueError):
        body = {}
    message = body.get("message") if isinstance(body, dict) else None
    return f"helix rejected the message ({exc.code}): {message or exc.reason}"


def _extract_message_id(payload: dict[str, Any]) -> str:
    data = payload.get("data")
    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        raise ChatApiError("helix response has no data")

    item = data[0]
    if not item.get("is_sent", False):
        drop = item.get("drop_reason") or {}
        reason = drop.get("message") if isinstance(drop, dict) else None
        LOGGER.warning("chat message dropped reason=%s", reason)
        raise ChatApiError(f"chat message dropped: {reason or 'unknown reason'}")

    return str(item.get("message_id") or "")
