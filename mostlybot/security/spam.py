"""Layered chat spam control.

Three independent trackers:
- user: any command by one chatter
- command: one command by any chatter (commands may declare their own policy)
- failed_notification: error replies sent to one chatter
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from mostlybot.security.rate_limit import CooldownTracker, LimitPolicy

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpamLimits:
    # max 1 command per user every 5 seconds
    user: LimitPolicy = LimitPolicy(max_attempts=1, window_sec=5)
    # max 1 use of a command by anyone every 5 seconds, unless the command overrides it
    command: LimitPolicy = LimitPolicy(max_attempts=1, window_sec=5)
    # max 2 error replies per user every 30 seconds
    failed_notification: LimitPolicy = LimitPolicy(max_attempts=2, window_sec=30)


DEFAULT_SPAM_LIMITS = SpamLimits()


class SpamController:
    def __init__(
        self,
        limits: SpamLimits = DEFAULT_SPAM_LIMITS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limits = limits
        self._users = CooldownTracker(limits.user, clock=clock)
        self._commands = CooldownTracker(limits.command, clock=clock)
        self._failed = CooldownTracker(limits.failed_notification, clock=clock)

    def check_user_cooldown(self, user_id: str) -> Optional[float]:
        remaining = self._users.check_and_update(user_id)
        if remaining is not None:
            LOGGER.debug("user cooldown user_id=%s remaining=%.1fs", user_id, remaining)
        return remaining

    def check_command_cooldown(self, command_name: str, policy: Optional[LimitPolicy] = None) -> Optional[float]:
        remaining = self._commands.check_and_update(command_name, policy)
        if remaining is not None:
            LOGGER.debug("command cooldown command=%s remaining=%.1fs", command_name, remaining)
        return remaining

    def check_failed_notification_cooldown(self, user_id: str) -> Optional[float]:
        remaining = self._failed.check_and_update(user_id)
        if remaining is not None:
            LOGGER.debug("error reply cooldown user_id=%s remaining=%.1fs", user_id, remaining)
        return remaining
