"""In-memory fixed-window rate limiting keyed by user id or command name."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class LimitPolicy:
    max_attempts: int
    window_sec: float

    def __post_init__(self) -> None:
        if self.max_attempts < 0:
            raise ValueError("max_attempts must be >= 0")
        if self.window_sec < 0:
            raise ValueError("window_sec must be >= 0")

    @property
    def is_unlimited(self) -> bool:
        return self.max_attempts == 0 or self.window_sec == 0


UNLIMITED = LimitPolicy(max_attempts=0, window_sec=0)


@dataclass
class UsageState:
    attempts: int
    window_start: float


class CooldownTracker:
    """Counts attempts per key inside a fixed window.

    The window restarts on the first attempt made after it elapsed, so a key
    gets a full fresh budget instead of a gradually decaying one. Check and
    update happen in a single call; callers must not split them.
    """

    def __init__(self, policy: LimitPolicy, clock: Callable[[], float] = time.monotonic) -> None:
        self.policy = policy
        self._clock = clock
        self._usage: dict[str, UsageState] = {}

    def check_and_update(self, key: str, policy: Optional[LimitPolicy] = None) -> Optional[float]:
        """Return None when allowed, else the seconds left until the window resets."""
        if not key:
            raise ValueError("rate limit key must not be empty")
        limit = policy if policy is not None else self.policy
        if limit.is_unlimited:
            return None

        now = self._clock()
        state = self._usage.get(key)
        if state is None:
            state = UsageState(attempts=0, window_start=now)
            self._usage[key] = state

        elapsed = now - state.window_start
        if elapsed >= limit.window_sec:
            state.attempts = 1
            state.window_start = now
            return None

        if state.attempts < limit.max_attempts:
            state.attempts += 1
            return None

        # blocked: leave state untouched so the remaining time keeps shrinking
        return limit.window_sec - elapsed

    def tracked_keys(self) -> int:
        return len(self._usage)
