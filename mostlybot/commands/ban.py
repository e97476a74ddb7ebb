"""Pretend-ban a chatter.

usage: ``!ban <user>``
"""

from __future__ import annotations

from typing import Optional

from mostlybot.bot.registry import CommandContext
from mostlybot.core.errors import CommandError
from mostlybot.security.rate_limit import LimitPolicy


class Ban:
    names = ("ban",)
    rate_limit: Optional[LimitPolicy] = None

    def help(self) -> str:
        return "!ban <user>"

    def handle(self, ctx: CommandContext) -> None:
        if not ctx.args:
            raise CommandError("No argument provided")
        target = ctx.args[0].replace("@", "")
        if not target:
            raise CommandError("No argument provided")
        ctx.reply(f"{target} has been banned")
