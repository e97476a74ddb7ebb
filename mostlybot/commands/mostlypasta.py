"""The GNU/Linux interjection, with your own words.

usage: ``!mostlypasta <gnu> <linux>``
"""

from __future__ import annotations

import textwrap

from mostlybot.adapters.helix_http import MAX_MESSAGE_LENGTH
from mostlybot.bot.registry import CommandContext
from mostlybot.core.errors import CommandError
from mostlybot.security.rate_limit import LimitPolicy

PASTA = (
    "I'd just like to interject for a moment. What you're refering to as {linux}, is in fact, "
    "{gnu}/{linux}, or as I've recently taken to calling it, {gnu} plus {linux}. {linux} is not an "
    "operating system unto itself, but rather another free component of a fully functioning {gnu} "
    "system made useful by the {gnu} corelibs, shell utilities and vital system components comprising "
    "a full OS as defined by POSIX. "
    "Many computer users run a modified version of the {gnu} system every day, without realizing it. "
    "Through a peculiar turn of events, the version of {gnu} which is widely used today is often called "
    "{linux}, and many of its users are not aware that it is basically the {gnu} system, developed by "
    "the {gnu} Project. "
    "There really is a {linux}, and these people are using it, but it is just a part of the system they "
    "use. {linux} is the kernel: the program in the system that allocates the machine's resources to the "
    "other programs that you run. The kernel is an essential part of an operating system, but useless by "
    "itself; it can only function in the context of a complete operating system. {linux} is normally used "
    "in combination with the {gnu} operating system: the whole system is basically {gnu} with {linux} "
    "added, or {gnu}/{linux}. All the so-called {linux} distributions are really distributions of "
    "{gnu}/{linux}!"
)


def pasta_chunks(gnu: str, linux: str, width: int = MAX_MESSAGE_LENGTH) -> list[str]:
    return textwrap.wrap(PASTA.format(gnu=gnu, linux=linux), width=width)


class MostlyPasta:
    names = ("mostlypasta",)
    rate_limit = LimitPolicy(max_attempts=1, window_sec=30)

    def help(self) -> str:
        return "!mostlypasta <gnu> <linux>"

    def handle(self, ctx: CommandContext) -> None:
        if len(ctx.args) < 2:
            raise CommandError("not enough arguments")
        if len(ctx.args) > 2:
            raise CommandError("too many arguments")

        first, *rest = pasta_chunks(gnu=ctx.args[0], linux=ctx.args[1])
        ctx.reply(first)
        for chunk in rest:
            ctx.say(chunk)
