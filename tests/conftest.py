from typing import Callable

import pytest

from mostlybot.models.chat import ChatMessage


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_message() -> Callable[..., ChatMessage]:
    counter = {"n": 0}

    def _make(text: str, user_id: str = "u1", user_name: str = "chatter", badges: tuple[str, ...] = ()) -> ChatMessage:
        counter["n"] += 1
        return ChatMessage.model_validate(
            {
                "broadcaster_user_id": "938429017",
                "chatter_user_id": user_id,
                "chatter_user_name": user_name,
                "chatter_user_login": user_name.lower(),
                "message_id": f"msg-{counter['n']}",
                "message": {"text": text, "fragments": [{"type": "text", "text": text}]},
                "badges": [{"set_id": b, "id": "1", "info": ""} for b in badges],
            }
        )

    return _make
