"""Inbound chat message contract.

Mirrors the Twitch EventSub ``channel.chat.message`` event. Only the fields the
bot reads are declared; everything else in the payload is ignored.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Badge(BaseModel):
    model_config = ConfigDict(extra="ignore")

    set_id: str
    id: str = ""
    info: str = ""


class MessageBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str = ""


class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    broadcaster_user_id: Optional[str] = None
    chatter_user_id: str = Field(min_length=1)
    chatter_user_name: str = ""
    chatter_user_login: str = ""
    message_id: str = Field(min_length=1)
    message: MessageBody
    badges: list[Badge] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return self.message.text

    @property
    def user_id(self) -> str:
        return self.chatter_user_id

    @property
    def user_name(self) -> str:
        return self.chatter_user_name or self.chatter_user_login or self.chatter_user_id

    def has_badge(self, set_id: str) -> bool:
        return any(b.set_id == set_id for b in self.badges)

    @property
    def is_broadcaster(self) -> bool:
        return self.has_badge("broadcaster")

    @property
    def is_moderator(self) -> bool:
        return self.has_badge("moderator") or self.is_broadcaster

    @property
    def is_vip(self) -> bool:
        return self.has_badge("vip")

    @property
    def is_subscriber(self) -> bool:
        return self.has_badge("subscriber")
