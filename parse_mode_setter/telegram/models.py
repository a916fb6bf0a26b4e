"""Pydantic models for Telegram Bot API responses."""

from typing import Any

from pydantic import BaseModel


class TelegramResponse(BaseModel):
    """Envelope returned by every Telegram Bot API method."""

    ok: bool
    result: Any = None
    description: str | None = None
    error_code: int | None = None


class TelegramChat(BaseModel):
    """Telegram chat information."""

    id: int
    type: str
    title: str | None = None
    username: str | None = None


class TelegramMessage(BaseModel):
    """Subset of a sent Telegram message needed by callers."""

    message_id: int
    date: int
    chat: TelegramChat
    text: str | None = None
    caption: str | None = None


class SendMessageResult(BaseModel):
    """Result of sending a message via Telegram."""

    message_id: int
    chat_id: int
