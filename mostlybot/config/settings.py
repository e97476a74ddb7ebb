"""Settings loader for the chat bot."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from mostlybot.adapters.helix_http import DEFAULT_API_BASE_URL
from mostlybot.security.rate_limit import LimitPolicy
from mostlybot.security.spam import DEFAULT_SPAM_LIMITS, SpamLimits


@dataclass(frozen=True)
class BotConfig:
    id: str
    command_prefix: str
    debug_notifications: bool


@dataclass(frozen=True)
class TwitchConfig:
    broadcaster_id: str
    api_base_url: str
    timeout_seconds: int
    min_send_interval_ms: int


@dataclass(frozen=True)
class BotSettings:
    version: str
    bot: BotConfig
    twitch: TwitchConfig
    rate_limit: SpamLimits


class SettingsLoadError(RuntimeError):
    """Raised when settings cannot be loaded."""


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise SettingsLoadError(f"missing required settings key: {key}")
    return data[key]


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SettingsLoadError(f"{key} must be an object")
    return value


def _limit(raw: dict[str, Any], key: str, default: LimitPolicy) -> LimitPolicy:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, dict):
        raise SettingsLoadError(f"rate_limit.{key} must be an object")
    try:
        max_attempts = int(value.get("max_attempts", default.max_attempts))
        window = float(value.get("window_seconds", default.window_sec))
    except (TypeError, ValueError) as exc:
        raise SettingsLoadError(f"rate_limit.{key} values must be numbers") from exc
    if max_attempts < 0:
        raise SettingsLoadError(f"rate_limit.{key}.max_attempts must be >= 0")
    if window < 0:
        raise SettingsLoadError(f"rate_limit.{key}.window_seconds must be >= 0")
    return LimitPolicy(max_attempts=max_attempts, window_sec=window)


def load_settings(path: Path) -> BotSettings:
    if not path.exists():
        raise SettingsLoadError(f"settings file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SettingsLoadError(f"settings file is not valid YAML: {path}") from exc
    if not isinstance(raw, dict):
        raise SettingsLoadError("settings root must be an object")

    bot_raw = _section(raw, "bot")
    twitch_raw = _section(raw, "twitch")
    rate_raw = _section(raw, "rate_limit")

    prefix = str(bot_raw.get("command_prefix", "!"))
    if len(prefix) != 1 or prefix.isspace() or prefix.isalnum() or prefix == "_":
        raise SettingsLoadError(f"invalid bot.command_prefix: {prefix!r}")

    try:
        timeout_seconds = int(twitch_raw.get("timeout_seconds", 10))
        min_send_interval_ms = int(twitch_raw.get("min_send_interval_ms", 100))
    except (TypeError, ValueError) as exc:
        raise SettingsLoadError("twitch timeouts must be integers") from exc
    if timeout_seconds <= 0:
        raise SettingsLoadError("twitch.timeout_seconds must be > 0")
    if min_send_interval_ms < 0:
        raise SettingsLoadError("twitch.min_send_interval_ms must be >= 0")

    debug_notifications = bot_raw.get("debug_notifications", False)
    if not isinstance(debug_notifications, bool):
        raise SettingsLoadError("bot.debug_notifications must be a boolean")

    api_base_url = str(twitch_raw.get("api_base_url", DEFAULT_API_BASE_URL)).strip()
    if not api_base_url.startswith("https://"):
        raise SettingsLoadError("twitch.api_base_url must be an https URL")

    return BotSettings(
        version=str(_require(raw, "version")),
        bot=BotConfig(
            id=str(bot_raw.get("id") or "").strip(),
            command_prefix=prefix,
            debug_notifications=debug_notifications,
        ),
        twitch=TwitchConfig(
            broadcaster_id=str(twitch_raw.get("broadcaster_id") or "").strip(),
            api_base_url=api_base_url,
            timeout_seconds=timeout_seconds,
            min_send_interval_ms=min_send_interval_ms,
        ),
        rate_limit=SpamLimits(
            user=_limit(rate_raw, "user", DEFAULT_SPAM_LIMITS.user),
            command=_limit(rate_raw, "command", DEFAULT_SPAM_LIMITS.command),
            failed_notification=_limit(rate_raw, "failed_notification", DEFAULT_SPAM_LIMITS.failed_notification),
        ),
    )
