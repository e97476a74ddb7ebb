"""Bulk command registration."""

from __future__ import annotations

from mostlybot.bot.registry import CommandRegistry
from mostlybot.commands.ban import Ban
from mostlybot.commands.bot_time import BotTime
from mostlybot.commands.count import Count
from mostlybot.commands.help import Commands, Help
from mostlybot.commands.links import link_commands
from mostlybot.commands.lurk import Lurk
from mostlybot.commands.mostlypasta import MostlyPasta
from mostlybot.commands.ping import Ping, Pong
from mostlybot.commands.progress import Progress


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    # most commands are just registered
    registry.register(MostlyPasta())
    registry.register(Ping())
    registry.register(Pong())
    registry.register(Ban())
    registry.register(Count())
    registry.register(Progress())
    registry.register(Lurk())
    registry.register(BotTime())
    for command in link_commands():
        registry.register(command)

    # registry readers go last, each seeing everything registered before it
    registry.register(Commands(registry.snapshot()))
    registry.register(Help(registry.snapshot()))
    return registry
