"""Chat command capability and the alias registry.

A command is any object with ``names``, ``rate_limit``, ``help()`` and
``handle(ctx)``. Commands may keep mutable state between calls (a counter, a
lurker list); the registry keeps exactly one instance per registration and
points every alias at it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

from mostlybot.adapters.chat_api import ChatApi, ChatApiError
from mostlybot.bot.parser import is_valid_command_name
from mostlybot.core.errors import CommandError
from mostlybot.models.chat import ChatMessage
from mostlybot.security.rate_limit import LimitPolicy

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandContext:
    message: ChatMessage
    name: str
    args: tuple[str, ...]
    api: ChatApi

    def reply(self, text: str) -> str:
        """Reply threaded under the invoking message."""
        return self._send(text, self.message.message_id)

    def say(self, text: str) -> str:
        """Post a plain chat message."""
        return self._send(text, None)

    def _send(self, text: str, parent_id: Optional[str]) -> str:
        try:
            reply_id = self.api.send_chat_message(text, reply_parent_message_id=parent_id)
        except ChatApiError as exc:
            LOGGER.error("reply failed command=%s error=%s", self.name, exc)
            raise CommandError(str(exc)) from exc
        LOGGER.debug("reply sent command=%s reply_id=%s", self.name, reply_id)
        return reply_id


class ChatCommand(Protocol):
    names: tuple[str, ...]
    # None falls back to the spam controller's command default.
    rate_limit: Optional[LimitPolicy]

    def help(self) -> str:
        """Usage text shown by !help and on handler errors."""

    def handle(self, ctx: CommandContext) -> None:
        """Run the command. Raise CommandError for failures the chatter should see."""


@dataclass(frozen=True, eq=False)
class CommandEntry:
    names: frozenset[str]
    rate_limit: Optional[LimitPolicy]
    handler: ChatCommand

    def help(self) -> str:
        return self.handler.help()


class CommandRegistry:
    def __init__(self) -> None:
        self._by_alias: dict[str, CommandEntry] = {}
        self._order: list[CommandEntry] = []

    def register(self, command: ChatCommand) -> CommandEntry:
        names = tuple(command.names)
        if not names:
            raise ValueError(f"command has no names: {type(command).__name__}")
        for name in names:
            if not is_valid_command_name(name):
                raise ValueError(f"invalid command name: {name!r}")

        entry = CommandEntry(names=frozenset(names), rate_limit=command.rate_limit, handler=command)
        for name in names:
            previous = self._by_alias.get(name)
            if previous is not None:
                # The old entry stays reachable through its other aliases.
                LOGGER.info("command alias replaced name=%s old=%s", name, type(previous.handler).__name__)
            self._by_alias[name] = entry
        self._order.append(entry)
        return entry

    def lookup(self, name: str) -> Optional[CommandEntry]:
        return self._by_alias.get(name)

    def names(self) -> list[str]:
        return sorted(self._by_alias)

    def entries(self) -> list[CommandEntry]:
        """Entries still reachable by at least one alias, in registration order."""
        live = {id(e) for e in self._by_alias.values()}
        return [e for e in self._order if id(e) in live]

    def snapshot(self) -> Mapping[str, CommandEntry]:
        return MappingProxyType(dict(self._by_alias))

    def __contains__(self, name: object) -> bool:
        return name in self._by_alias

    def __len__(self) -> int:
        return len(self._by_alias)
