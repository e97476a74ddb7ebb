"""Shows how long the bot has been running.

usage: ``!bottime``
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from mostlybot.bot.registry import CommandContext
from mostlybot.security.rate_limit import LimitPolicy


def uptime_text(seconds: float) -> str:
    seconds = int(seconds)
    minutes = seconds // 60
    hours = minutes // 60
    if minutes == 0:
        return f"Bot has been running for {seconds} seconds."
    if hours == 0:
        return f"Bot has been running for {minutes} minutes."
    return f"Bot has been running for {hours} hours."


class BotTime:
    names = ("bottime", "bot_time")
    rate_limit: Optional[LimitPolicy] = None

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started_at = clock()

    def help(self) -> str:
        return "!bottime"

    def handle(self, ctx: CommandContext) -> None:
        ctx.reply(uptime_text(self._clock() - self._started_at))
