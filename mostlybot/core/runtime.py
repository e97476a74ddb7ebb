"""Application runtime wiring."""

from __future__ import annotations

import logging
import time
from collections import Counter
from typing import Callable, Iterable, Optional

from mostlybot.adapters.chat_api import ChatApi
from mostlybot.bot.registry import CommandRegistry
from mostlybot.commands.catalog import build_registry
from mostlybot.config.settings import BotSettings
from mostlybot.core.dispatcher import Dispatcher, DispatchStatus
from mostlybot.models.chat import ChatMessage
from mostlybot.security.spam import SpamController

LOGGER = logging.getLogger(__name__)


class BotRuntime:
    def __init__(
        self,
        settings: BotSettings,
        api: ChatApi,
        bot_id: str,
        registry: Optional[CommandRegistry] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings
        self.api = api
        self.spam = SpamController(settings.rate_limit, clock=clock)
        self.registry = registry if registry is not None else build_registry()
        self.dispatcher = Dispatcher(
            registry=self.registry,
            spam=self.spam,
            api=api,
            bot_id=bot_id,
            prefix=settings.bot.command_prefix,
            debug=settings.bot.debug_notifications,
        )

    def run(self, messages: Iterable[ChatMessage]) -> Counter[DispatchStatus]:
        """Dispatch messages strictly one after another until the stream ends."""
        stats: Counter[DispatchStatus] = Counter()
        LOGGER.info("dispatch loop started commands=%s", len(self.registry))
        try:
            for message in messages:
                result = self.dispatcher.dispatch(message)
                stats[result.status] += 1
                if result.error is not None:
                    LOGGER.debug(
                        "message_id=%s status=%s error=%s",
                        message.message_id,
                        result.status.value,
                        result.error.kind.value,
                    )
        except KeyboardInterrupt:
            LOGGER.info("caught interrupt. shutting down...")
        LOGGER.info("dispatch loop stopped %s", dict((k.value, v) for k, v in stats.items()))
        return stats
