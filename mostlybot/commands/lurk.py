"""Lets chatters announce they are lurking.

usage: ``!lurk`` or ``!lurkwith <status>`` or ``!unlurk`` or ``!lurker [@username]``
or ``!lurkers``
"""

from __future__ import annotations

from typing import Optional

from mostlybot.bot.registry import CommandContext
from mostlybot.core.errors import CommandError
from mostlybot.security.rate_limit import LimitPolicy

LURK_SUCCESSFUL = "have a nice lurk!"
# "@" is replaced with the chatter's name
LURK_FAILED = (
    "you are already lurking silly! to unlurk do `!unlurk` or view your lurk-status with `!lurker @`"
)
LURK_STATUS_UPDATED = "lurk status successfully updated!"
# "%" is replaced with the previous status
UNLURK_SUCCESSFUL = "welcome back! hope you were productive %"
UNLURK_FAILED = "you weren't lurking but welcome back anyway!"
# "@" -> @username, "%" -> status
LURKED_SUCCESSFUL = "@ is lurking %"
LURKER_FAILED = "you're not lurking"


class Lurk:
    names = ("lurk", "lurkwith", "unlurk", "lurker", "lurkers")
    rate_limit: Optional[LimitPolicy] = None

    def __init__(self) -> None:
        # username -> optional status
        self.users_lurking: dict[str, Optional[str]] = {}

    def help(self) -> str:
        return "`!lurk` or `!lurkwith <status>` or `!unlurk` or `!lurker [@username]` or `!lurkers`"

    def handle(self, ctx: CommandContext) -> None:
        user = ctx.message.user_name

        if ctx.name == "lurk":
            if user in self.users_lurking:
                ctx.reply(LURK_FAILED.replace("@", user))
                return
            self.users_lurking[user] = None
            ctx.reply(LURK_SUCCESSFUL)
            return

        if ctx.name == "lurkwith":
            status = " ".join(ctx.args) or None
            was_lurking = user in self.users_lurking
            self.users_lurking[user] = status
            ctx.reply(LURK_STATUS_UPDATED if was_lurking else LURK_SUCCESSFUL)
            return

        if ctx.name == "unlurk":
            if user not in self.users_lurking:
                ctx.reply(UNLURK_FAILED)
                return
            previous = self.users_lurking.pop(user)
            ctx.reply(UNLURK_SUCCESSFUL.replace("%", previous or "during your lurk!"))
            return

        if ctx.name == "lurker":
            username = " ".join(ctx.args).lstrip("@") or user
            if username not in self.users_lurking:
                ctx.say(LURKER_FAILED)
                return
            status = self.users_lurking[username] or "with no status"
            ctx.say(LURKED_SUCCESSFUL.replace("@", f"@{username}").replace("%", status))
            return

        if ctx.name == "lurkers":
            lurkers = ", ".join(f"@{name}" for name in self.users_lurking) or "<none>"
            ctx.say(f"Lurkers: {lurkers}")
            return

        raise CommandError(f"lurk invoked as unknown command {ctx.name!r}")
