"""Chat command dispatch and admission control.

Per message, in this order:
1. drop messages written by the bot itself
2. parse; ordinary chat is dropped silently
3. per-user cooldown
4. lookup, per-command cooldown, then the handler behind a fault boundary
5. any failure becomes one reply, gated by the per-user error-reply cooldown

Tracker state is updated without locks. That is only correct while a single
consumer calls ``dispatch`` one message at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mostlybot.adapters.chat_api import ChatApi, ChatApiError
from mostlybot.bot.parser import DEFAULT_PREFIX, ParseKind, parse_command
from mostlybot.bot.registry import CommandContext, CommandRegistry
from mostlybot.bot.templates import debug_error_text, error_text
from mostlybot.core.errors import ChatError, ChatErrorKind, CommandError
from mostlybot.models.chat import ChatMessage
from mostlybot.security.spam import SpamController

LOGGER = logging.getLogger(__name__)


class DispatchStatus(str, Enum):
    DISCARDED = "DISCARDED"
    HANDLED = "HANDLED"
    NOTIFIED = "NOTIFIED"
    SUPPRESSED = "SUPPRESSED"
    SEND_FAILED = "SEND_FAILED"


@dataclass(frozen=True)
class DispatchResult:
    status: DispatchStatus
    error: Optional[ChatError] = None


DISCARDED = DispatchResult(status=DispatchStatus.DISCARDED)
HANDLED = DispatchResult(status=DispatchStatus.HANDLED)


class Dispatcher:
    def __init__(
        self,
        registry: CommandRegistry,
        spam: SpamController,
        api: ChatApi,
        bot_id: str,
        prefix: str = DEFAULT_PREFIX,
        debug: bool = False,
    ) -> None:
        if not bot_id:
            raise ValueError("bot_id must not be empty")
        self.registry = registry
        self.spam = spam
        self.api = api
        self.bot_id = bot_id
        self.prefix = prefix
        self.debug = debug

    def dispatch(self, message: ChatMessage) -> DispatchResult:
        if message.user_id == self.bot_id:
            return DISCARDED

        parsed = parse_command(message.text, self.prefix)
        if parsed.kind is ParseKind.NOT_A_COMMAND:
            if self.debug:
                return self._notify(message, ChatError(ChatErrorKind.NOT_A_COMMAND))
            return DISCARDED
        if parsed.kind is ParseKind.INVALID_SYNTAX:
            return self._notify(message, ChatError(ChatErrorKind.INVALID_COMMAND))

        name = parsed.name
        LOGGER.info("dispatch user_id=%s command=%s args=%s", message.user_id, name, len(parsed.args))

        remaining = self.spam.check_user_cooldown(message.user_id)
        if remaining is not None:
            return self._notify(message, ChatError(ChatErrorKind.SPAM_DETECTED, command=name, remaining_sec=remaining))

        entry = self.registry.lookup(name)
        if entry is None:
            return self._notify(message, ChatError(ChatErrorKind.COMMAND_DOES_NOT_EXIST, command=name))

        remaining = self.spam.check_command_cooldown(name, entry.rate_limit)
        if remaining is not None:
            return self._notify(message, ChatError(ChatErrorKind.COMMAND_COOLDOWN, command=name, remaining_sec=remaining))

        ctx = CommandContext(message=message, name=name, args=parsed.args, api=self.api)
        try:
            entry.handler.handle(ctx)
        except CommandError as exc:
            LOGGER.info("command failed command=%s error=%s", name, exc)
            return self._notify(message, ChatError(ChatErrorKind.HANDLER_ERROR, command=name, detail=str(exc)))
        except Exception as exc:
            LOGGER.exception("command aborted command=%s", name)
            return self._notify(
                message,
                ChatError(ChatErrorKind.HANDLER_PANIC, command=name, detail=f"{type(exc).__name__}: {exc}"),
            )

        return HANDLED

    def _notify(self, message: ChatMessage, error: ChatError) -> DispatchResult:
        remaining = self.spam.check_failed_notification_cooldown(message.user_id)
        if remaining is not None:
            LOGGER.warning(
                "user %s is on error cooldown for another %.1f seconds (%s)",
                message.user_id,
                remaining,
                error.kind.value,
            )
            return DispatchResult(status=DispatchStatus.SUPPRESSED, error=error)

        if self.debug:
            text = debug_error_text(error, message, self.prefix)
        else:
            text = error_text(error, message, self.prefix)

        try:
            self.api.send_chat_message(text, reply_parent_message_id=message.message_id)
        except ChatApiError as exc:
            LOGGER.warning("error reply failed user_id=%s kind=%s error=%s", message.user_id, error.kind.value, exc)
            return DispatchResult(status=DispatchStatus.SEND_FAILED, error=error)

        return DispatchResult(status=DispatchStatus.NOTIFIED, error=error)
