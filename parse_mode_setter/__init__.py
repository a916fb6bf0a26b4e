"""Automatically set the parse mode on outgoing Telegram Bot API calls.

Install ParseModeSetterPlugin on a TelegramClient and every eligible call
(sendMessage, sendPhoto, sendPoll, answerInlineQuery, ...) is sent with the
configured parse mode in the fields that accept one.
"""

from parse_mode_setter.enums import APIMethod, ParseMode
from parse_mode_setter.exceptions import (
    DuplicateTransformerError,
    ParseModeSetterError,
    TelegramClientError,
    TransformerNotFoundError,
    TransformerRegistryError,
)
from parse_mode_setter.plugin import ParseModeSetterPlugin
from parse_mode_setter.telegram.client import TelegramClient
from parse_mode_setter.telegram.payload import Payload
from parse_mode_setter.transformers import (
    DEFAULT_ALLOWED_METHODS,
    ParseModeSetter,
    ParseModeSetterConfig,
    Transformer,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_ALLOWED_METHODS",
    "APIMethod",
    "DuplicateTransformerError",
    "ParseMode",
    "ParseModeSetter",
    "ParseModeSetterConfig",
    "ParseModeSetterError",
    "ParseModeSetterPlugin",
    "Payload",
    "TelegramClient",
    "TelegramClientError",
    "Transformer",
    "TransformerNotFoundError",
    "TransformerRegistryError",
]
