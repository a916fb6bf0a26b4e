"""Telegram utilities."""

from parse_mode_setter.telegram.utils.config import TelegramConfig, get_telegram_settings

__all__ = [
    "TelegramConfig",
    "get_telegram_settings",
]
