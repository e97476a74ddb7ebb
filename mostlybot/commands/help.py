"""Special commands that read the registry.

``!help <command>`` shows another command's usage; ``!commands`` lists what
exists. Both get a read-only snapshot of the registry, so they must be built
after every other command is registered.
"""

from __future__ import annotations

from typing import Mapping, Optional

from mostlybot.bot.registry import CommandContext, CommandEntry
from mostlybot.core.errors import CommandError
from mostlybot.security.rate_limit import LimitPolicy

HELP_COOLDOWN_SECS = 3


class Help:
    names = ("help",)
    rate_limit: Optional[LimitPolicy] = LimitPolicy(max_attempts=1, window_sec=HELP_COOLDOWN_SECS)

    def __init__(self, commands: Mapping[str, CommandEntry]) -> None:
        self._commands = commands

    def help(self) -> str:
        return "!help <command name>"

    def handle(self, ctx: CommandContext) -> None:
        if not ctx.args:
            ctx.reply(f"usage: {self.help()}")
            ctx.reply("[WARN] if you're looking for the list of commands try: !commands")
            return
        if len(ctx.args) > 1:
            raise CommandError("too many arguments")

        name = ctx.args[0].lstrip("!")
        if name in self.names:
            ctx.reply(f"usage: {self.help()}")
            return
        entry = self._commands.get(name)
        if entry is None:
            raise CommandError(f'"{name}" does not exist')
        ctx.reply(f"usage: {entry.help()}")


class Commands:
    names = ("commands", "cmds")
    rate_limit: Optional[LimitPolicy] = None

    def __init__(self, commands: Mapping[str, CommandEntry]) -> None:
        self._commands = commands

    def help(self) -> str:
        return "!commands"

    def handle(self, ctx: CommandContext) -> None:
        primary: set[str] = set()
        seen: set[int] = set()
        for entry in self._commands.values():
            if id(entry) in seen:
                continue
            seen.add(id(entry))
            primary.add(entry.handler.names[0])
        listing = " ".join(f"!{name}" for name in sorted(primary | {"commands", "help"}))
        ctx.reply(f"commands: {listing}")
