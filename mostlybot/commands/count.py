"""Counts how many times it has been shown in chat.

usage: ``!count``
"""

from __future__ import annotations

from mostlybot.bot.registry import CommandContext
from mostlybot.security.rate_limit import LimitPolicy


class Count:
    names = ("count",)
    rate_limit = LimitPolicy(max_attempts=1, window_sec=0.25)

    def __init__(self) -> None:
        self.count = 0

    def help(self) -> str:
        return "!count"

    def handle(self, ctx: CommandContext) -> None:
        ctx.say(f"current count: {self.count}")
        # only reached when the message went out
        self.count += 1
