"""Transformers applied to outgoing Telegram API calls."""

from parse_mode_setter.transformers.base import APICaller, Transformer
from parse_mode_setter.transformers.config import (
    DEFAULT_ALLOWED_METHODS,
    ParseModeSetterConfig,
    get_parse_mode_settings,
)
from parse_mode_setter.transformers.parse_mode import ParseModeSetter

__all__ = [
    "DEFAULT_ALLOWED_METHODS",
    "APICaller",
    "ParseModeSetter",
    "ParseModeSetterConfig",
    "Transformer",
    "get_parse_mode_settings",
]
