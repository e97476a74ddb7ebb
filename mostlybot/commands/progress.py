"""Reports very precise progress.

usage: ``!progress``
"""

from __future__ import annotations

import random
from typing import Optional

from mostlybot.bot.registry import CommandContext
from mostlybot.security.rate_limit import LimitPolicy


class Progress:
    names = ("progress",)
    rate_limit: Optional[LimitPolicy] = None

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def help(self) -> str:
        return "!progress"

    def handle(self, ctx: CommandContext) -> None:
        progress = self._rng.uniform(0.0, 100.0)
        ctx.reply(f"Progress: {progress:.6f}% done!")
