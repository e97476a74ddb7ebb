import pytest

from mostlybot.security.rate_limit import UNLIMITED, CooldownTracker, LimitPolicy


@pytest.mark.parametrize(
    "policy",
    [UNLIMITED, LimitPolicy(max_attempts=0, window_sec=5), LimitPolicy(max_attempts=3, window_sec=0)],
)
def test_unlimited_policy_never_blocks(policy: LimitPolicy, clock) -> None:
    tracker = CooldownTracker(policy, clock=clock)
    for key in ("user_a", "user_b"):
        for _ in range(20):
            assert tracker.check_and_update(key) is None
    assert tracker.tracked_keys() == 0


def test_blocks_after_max_attempts_within_window(clock) -> None:
    policy = LimitPolicy(max_attempts=3, window_sec=0.05)
    tracker = CooldownTracker(policy, clock=clock)

    for _ in range(3):
        assert tracker.check_and_update("user_a") is None

    remaining = tracker.check_and_update("user_a")
    assert remaining is not None
    assert 0 < remaining <= policy.window_sec


def test_window_resets_fully_after_elapsed(clock) -> None:
    tracker = CooldownTracker(LimitPolicy(max_attempts=2, window_sec=10), clock=clock)
    assert tracker.check_and_update("k") is None
    assert tracker.check_and_update("k") is None
    assert tracker.check_and_update("k") is not None

    clock.advance(10)
    assert tracker.check_and_update("k") is None
    assert tracker.check_and_update("k") is None
    assert tracker.check_and_update("k") is not None


def test_remaining_is_exact_and_shrinks_while_blocked(clock) -> None:
    tracker = CooldownTracker(LimitPolicy(max_attempts=1, window_sec=5), clock=clock)
    assert tracker.check_and_update("k") is None

    clock.advance(1)
    assert tracker.check_and_update("k") == pytest.approx(4)
    clock.advance(1.5)
    assert tracker.check_and_update("k") == pytest.approx(2.5)
    clock.advance(2.5)
    assert tracker.check_and_update("k") is None


def test_fixed_window_boundary(clock) -> None:
    # attempts late in one window do not carry into the next
    tracker = CooldownTracker(LimitPolicy(max_attempts=1, window_sec=5), clock=clock)
    assert tracker.check_and_update("k") is None
    clock.advance(4.5)
    assert tracker.check_and_update("k") is not None
    clock.advance(0.5)
    assert tracker.check_and_update("k") is None
    clock.advance(0.25)
    assert tracker.check_and_update("k") == pytest.approx(4.75)


def test_keys_are_independent(clock) -> None:
    tracker = CooldownTracker(LimitPolicy(max_attempts=1, window_sec=5), clock=clock)
    assert tracker.check_and_update("user_a") is None
    assert tracker.check_and_update("user_a") is not None
    assert tracker.check_and_update("user_b") is None
    assert tracker.tracked_keys() == 2


def test_per_call_policy_overrides_tracker_policy(clock) -> None:
    tracker = CooldownTracker(LimitPolicy(max_attempts=1, window_sec=5), clock=clock)
    wide = LimitPolicy(max_attempts=3, window_sec=5)
    assert tracker.check_and_update("cmd", wide) is None
    assert tracker.check_and_update("cmd", wide) is None
    assert tracker.check_and_update("cmd", wide) is None
    assert tracker.check_and_update("cmd", wide) is not None
    assert tracker.check_and_update("cmd", UNLIMITED) is None


def test_real_clock_window_elapses() -> None:
    import time

    policy = LimitPolicy(max_attempts=1, window_sec=0.05)
    tracker = CooldownTracker(policy)
    assert tracker.check_and_update("k") is None
    assert tracker.check_and_update("k") is not None
    time.sleep(policy.window_sec)
    assert tracker.check_and_update("k") is None


def test_rejects_negative_policy_and_empty_key() -> None:
    with pytest.raises(ValueError):
        LimitPolicy(max_attempts=-1, window_sec=5)
    with pytest.raises(ValueError):
        LimitPolicy(max_attempts=1, window_sec=-5)
    with pytest.raises(ValueError):
        CooldownTracker(UNLIMITED).check_and_update("")
