from mostlybot.security.rate_limit import LimitPolicy
from mostlybot.security.spam import DEFAULT_SPAM_LIMITS, SpamController, SpamLimits


def test_default_limits() -> None:
    assert DEFAULT_SPAM_LIMITS.user == LimitPolicy(max_attempts=1, window_sec=5)
    assert DEFAULT_SPAM_LIMITS.command == LimitPolicy(max_attempts=1, window_sec=5)
    assert DEFAULT_SPAM_LIMITS.failed_notification == LimitPolicy(max_attempts=2, window_sec=30)


def test_user_cooldown_one_per_five_seconds(clock) -> None:
    spam = SpamController(clock=clock)
    assert spam.check_user_cooldown("u1") is None
    assert spam.check_user_cooldown("u1") is not None
    assert spam.check_user_cooldown("u2") is None
    clock.advance(5)
    assert spam.check_user_cooldown("u1") is None


def test_command_cooldown_uses_override_when_given(clock) -> None:
    spam = SpamController(clock=clock)
    fast = LimitPolicy(max_attempts=1, window_sec=0.25)

    assert spam.check_command_cooldown("count", fast) is None
    assert spam.check_command_cooldown("count", fast) is not None
    clock.advance(0.25)
    assert spam.check_command_cooldown("count", fast) is None

    assert spam.check_command_cooldown("ping") is None
    clock.advance(1)
    remaining = spam.check_command_cooldown("ping")
    assert remaining is not None and 3.9 < remaining <= 4


def test_failed_notifications_two_per_thirty_seconds(clock) -> None:
    spam = SpamController(clock=clock)
    assert spam.check_failed_notification_cooldown("u1") is None
    assert spam.check_failed_notification_cooldown("u1") is None
    assert spam.check_failed_notification_cooldown("u1") is not None
    clock.advance(30)
    assert spam.check_failed_notification_cooldown("u1") is None


def test_trackers_are_independent(clock) -> None:
    spam = SpamController(clock=clock)
    assert spam.check_user_cooldown("same") is None
    assert spam.check_user_cooldown("same") is not None
    # same key, other trackers untouched
    assert spam.check_command_cooldown("same") is None
    assert spam.check_failed_notification_cooldown("same") is None


def test_zero_limit_disables_checks(clock) -> None:
    off = LimitPolicy(max_attempts=0, window_sec=0.05)
    spam = SpamController(SpamLimits(user=off, command=off, failed_notification=off), clock=clock)
    for _ in range(5):
        assert spam.check_user_cooldown("user_a") is None
        assert spam.check_command_cooldown("cmd_a") is None
        assert spam.check_failed_notification_cooldown("user_a") is None
