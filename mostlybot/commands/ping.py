"""Liveness commands.

usage: ``!ping`` / ``!pong``
"""

from __future__ import annotations

from typing import Optional

from mostlybot.bot.registry import CommandContext
from mostlybot.security.rate_limit import LimitPolicy


class Ping:
    names = ("ping",)
    rate_limit: Optional[LimitPolicy] = None

    def help(self) -> str:
        return "!ping"

    def handle(self, ctx: CommandContext) -> None:
        ctx.reply("pong")


class Pong:
    names = ("pong",)
    rate_limit: Optional[LimitPolicy] = None

    def help(self) -> str:
        return "!pong"

    def handle(self, ctx: CommandContext) -> None:
        ctx.reply("FeelsWeirdMan")
