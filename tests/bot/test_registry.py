from typing import Optional

import pytest

from mostlybot.bot.registry import CommandContext, CommandRegistry
from mostlybot.security.rate_limit import LimitPolicy


class _Cmd:
    rate_limit: Optional[LimitPolicy] = None

    def __init__(self, *names: str, usage: str = "") -> None:
        self.names = names
        self.usage = usage

    def help(self) -> str:
        return self.usage

    def handle(self, ctx: CommandContext) -> None:
        return None


def test_every_alias_points_at_one_entry() -> None:
    reg = CommandRegistry()
    entry = reg.register(_Cmd("commands", "cmds"))
    assert reg.lookup("commands") is entry
    assert reg.lookup("cmds") is entry
    assert entry.names == frozenset({"commands", "cmds"})
    assert len(reg) == 2
    assert reg.entries() == [entry]


def test_lookup_missing_returns_none_and_is_case_sensitive() -> None:
    reg = CommandRegistry()
    reg.register(_Cmd("ping"))
    assert reg.lookup("nope") is None
    assert reg.lookup("Ping") is None
    assert "ping" in reg


def test_last_registration_wins_and_old_entry_stays_reachable() -> None:
    reg = CommandRegistry()
    old = reg.register(_Cmd("bot", "mostlybot", usage="old"))
    new = reg.register(_Cmd("bot", usage="new"))

    assert reg.lookup("bot") is new
    assert reg.lookup("mostlybot") is old
    assert reg.entries() == [old, new]


def test_fully_shadowed_entry_drops_out_of_entries() -> None:
    reg = CommandRegistry()
    reg.register(_Cmd("ping"))
    new = reg.register(_Cmd("ping"))
    assert reg.entries() == [new]


def test_entry_carries_declared_rate_limit() -> None:
    cmd = _Cmd("count")
    cmd.rate_limit = LimitPolicy(max_attempts=1, window_sec=0.25)
    entry = CommandRegistry().register(cmd)
    assert entry.rate_limit == LimitPolicy(max_attempts=1, window_sec=0.25)


def test_snapshot_is_read_only_and_detached() -> None:
    reg = CommandRegistry()
    reg.register(_Cmd("ping"))
    snap = reg.snapshot()
    reg.register(_Cmd("pong"))

    assert "ping" in snap
    assert "pong" not in snap
    with pytest.raises(TypeError):
        snap["x"] = snap["ping"]  # type: ignore[index]


@pytest.mark.parametrize("names", [(), ("ko-fi",), ("",), ("!ping",)])
def test_register_rejects_bad_names(names: tuple[str, ...]) -> None:
    with pytest.raises(ValueError):
        CommandRegistry().register(_Cmd(*names))


def test_names_sorted() -> None:
    reg = CommandRegistry()
    reg.register(_Cmd("yt", "youtube"))
    reg.register(_Cmd("ban"))
    assert reg.names() == ["ban", "youtube", "yt"]
