"""mostlybot chat command runner entrypoint.

Reads chat events (one JSON object per line) from a file or stdin, typically
piped from the broker consumer, and answers commands in Twitch chat.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from mostlybot.adapters.chat_api import ChatApi
from mostlybot.adapters.console_api import ConsoleChatApi
from mostlybot.adapters.helix_http import HelixChatApi
from mostlybot.adapters.message_source import iter_chat_messages
from mostlybot.config.secrets import DEFAULT_SERVICE_NAME, load_twitch_secrets
from mostlybot.config.settings import BotSettings, SettingsLoadError, load_settings
from mostlybot.core.runtime import BotRuntime
from mostlybot.secrets.store import SecretStoreError

LOGGER = logging.getLogger(__name__)


def _default_config_path() -> Path:
    return Path(os.getenv("MOSTLYBOT_CONFIG", "config/bot.yaml"))


def _resolve_bot_id(settings: BotSettings) -> str:
    return (os.getenv("TWITCH_BOT_ID", "") or settings.bot.id).strip()


def _build_api(settings: BotSettings, bot_id: str, dry_run: bool) -> ChatApi:
    if dry_run:
        return ConsoleChatApi()
    service_name = os.getenv("MOSTLYBOT_SECRET_SERVICE", "").strip() or DEFAULT_SERVICE_NAME
    secrets = load_twitch_secrets(service_name=service_name)
    if not settings.twitch.broadcaster_id:
        raise SettingsLoadError("twitch.broadcaster_id is required unless --dry-run is used")
    return HelixChatApi(
        client_id=secrets.client_id,
        access_token=secrets.access_token,
        broadcaster_id=settings.twitch.broadcaster_id,
        sender_id=bot_id,
        api_base_url=settings.twitch.api_base_url,
        timeout_seconds=settings.twitch.timeout_seconds,
        min_send_interval_sec=settings.twitch.min_send_interval_ms / 1000,
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="mostlybot Twitch chat command runner")
    parser.add_argument("--config", help="settings YAML (default: $MOSTLYBOT_CONFIG or config/bot.yaml)")
    parser.add_argument("--input", help="chat event JSON lines file (default: stdin)")
    parser.add_argument("--dry-run", action="store_true", help="print replies instead of sending them")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config_path = Path(args.config) if args.config else _default_config_path()
    try:
        settings = load_settings(config_path)
    except SettingsLoadError as exc:
        LOGGER.error("startup blocked by invalid settings: %s", exc)
        print(f"Startup failed: settings are invalid.\n- config: {config_path}\n- detail: {exc}", file=sys.stderr)
        return 2

    bot_id = _resolve_bot_id(settings)
    if not bot_id:
        print("Startup failed: bot id is missing. Set bot.id or TWITCH_BOT_ID.", file=sys.stderr)
        return 2

    try:
        api = _build_api(settings, bot_id=bot_id, dry_run=args.dry_run)
    except SecretStoreError as exc:
        LOGGER.error("startup blocked by missing secret: %s", exc)
        print(
            "Startup failed: required Twitch secret is missing in OS credential store.\n"
            f"- detail: {exc}\n"
            "Store twitch_client_id and twitch_access_token with keyring first.",
            file=sys.stderr,
        )
        return 2
    except SettingsLoadError as exc:
        print(f"Startup failed: {exc}", file=sys.stderr)
        return 2

    LOGGER.info("starting bot_id=%s config=%s dry_run=%s", bot_id, config_path, args.dry_run)
    runtime = BotRuntime(settings=settings, api=api, bot_id=bot_id)

    if args.input:
        with Path(args.input).open("r", encoding="utf-8") as fp:
            runtime.run(iter_chat_messages(fp))
    else:
        runtime.run(iter_chat_messages(sys.stdin))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
