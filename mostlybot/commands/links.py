"""Commands that answer with a fixed link."""

from __future__ import annotations

from typing import Optional

from mostlybot.bot.registry import CommandContext
from mostlybot.security.rate_limit import LimitPolicy


class LinkCommand:
    rate_limit: Optional[LimitPolicy] = None

    def __init__(self, names: tuple[str, ...], text: str) -> None:
        self.names = names
        self._text = text

    def help(self) -> str:
        return f"!{self.names[0]}"

    def handle(self, ctx: CommandContext) -> None:
        ctx.reply(self._text)


def link_commands() -> list[LinkCommand]:
    return [
        LinkCommand(
            ("mostlybot", "bot"),
            "contribute to the mostlybot here!: https://github.com/mostlymaxi/twitch-interactive-things",
        ),
        LinkCommand(("discord", "disc"), "join the SPARCL discord: https://discord.gg/aMAAbZy4QD"),
        LinkCommand(("kofi", "coffee"), "buy maxi a coffee: https://ko-fi.com/mostlymaxi"),
        LinkCommand(("git", "github"), "check out maxi's git: https://github.com/mostlymaxi"),
        LinkCommand(("youtube", "yt"), "check out maxi's youtube!: https://www.youtube.com/@mostlymaxi"),
        LinkCommand(("vods", "vod"), "check out maxi's vods on youtube!: https://www.youtube.com/@mostlyvods"),
    ]
