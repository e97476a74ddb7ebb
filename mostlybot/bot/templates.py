"""Chat reply templates for dispatcher errors."""

from __future__ import annotations

from mostlybot.core.errors import ChatError, ChatErrorKind
from mostlybot.models.chat import ChatMessage


def _seconds(value: float | None) -> str:
    return f"{max(0.0, value or 0.0):.1f}"


def error_text(error: ChatError, message: ChatMessage, prefix: str = "!") -> str:
    raw = message.text.strip()
    name = error.command or ""
    kind = error.kind

    if kind is ChatErrorKind.NOT_A_COMMAND:
        return f'"{raw}" is not a command'
    if kind is ChatErrorKind.INVALID_COMMAND:
        return f'"{raw}", invalid command format'
    if kind is ChatErrorKind.SPAM_DETECTED:
        return f'"{raw}", you are sending commands too quickly'
    if kind is ChatErrorKind.COMMAND_DOES_NOT_EXIST:
        return f'"{name}" does not exist, find the list of existing commands with {prefix}commands'
    if kind is ChatErrorKind.COMMAND_COOLDOWN:
        return f'"{name}" is on cooldown, wait {_seconds(error.remaining_sec)} seconds'
    if kind is ChatErrorKind.HANDLER_ERROR:
        return f'"{name}" command handle error: {error.detail or "unknown error"}'
    if kind is ChatErrorKind.HANDLER_PANIC:
        return f'"{name}" command failed unexpectedly'
    return f'"{raw}" failed'


def debug_error_text(error: ChatError, message: ChatMessage, prefix: str = "!") -> str:
    return (
        f"@{message.user_name}, id: {message.user_id}, "
        f'msg: {error_text(error, message, prefix)}, raw: "{message.text}"'
    )
