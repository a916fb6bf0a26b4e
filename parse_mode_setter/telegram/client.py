"""Telegram Bot API client with a chain of outgoing call transformers."""

import json
import logging
from functools import partial
from typing import Any

import requests
from pydantic import ValidationError

from parse_mode_setter.enums import APIMethod
from parse_mode_setter.exceptions import (
    DuplicateTransformerError,
    TelegramClientError,
    TransformerNotFoundError,
)
from parse_mode_setter.telegram.models import SendMessageResult, TelegramMessage, TelegramResponse
from parse_mode_setter.telegram.payload import Payload
from parse_mode_setter.telegram.utils.config import TelegramConfig, get_telegram_settings
from parse_mode_setter.transformers.base import APICaller, Transformer

logger = logging.getLogger(__name__)

# Default API timeout in seconds
DEFAULT_REQUEST_TIMEOUT = 30


class TelegramClient:
    """Client for calling the Telegram Bot API.

    Every call runs through the registered transformers in registration
    order before it reaches the HTTP transport.
    """

    def __init__(
        self,
        *,
        bot_token: str,
        chat_id: str | None = None,
        request_timeout: int = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        """Initialise the Telegram client.

        :param bot_token: Telegram bot token from @BotFather.
        :param chat_id: Default chat ID for sending messages. Can be overridden per-message.
        :param request_timeout: Timeout in seconds for each API request.
        """
        self._bot_token = bot_token
        self._chat_id = chat_id
        self._request_timeout = request_timeout
        self._base_url = f"https://api.telegram.org/bot{self._bot_token}"
        self._transformers: list[Transformer] = []
        logger.debug(f"TelegramClient initialised with request_timeout={request_timeout}s")

    @classmethod
    def from_settings(cls, settings: TelegramConfig | None = None) -> "TelegramClient":
        """Create a client from Telegram settings.

        :param settings: Telegram settings. If not provided, loads from env.
        :returns: Configured TelegramClient.
        """
        settings = settings or get_telegram_settings()
        return cls(
            bot_token=settings.bot_token,
            chat_id=settings.chat_id,
            request_timeout=settings.request_timeout,
        )

    @property
    def chat_id(self) -> str | None:
        """Get the configured chat ID."""
        return self._chat_id

    @property
    def transformers(self) -> tuple[Transformer, ...]:
        """Get the registered transformers in registration order."""
        return tuple(self._transformers)

    def use(self, transformer: Transformer) -> None:
        """Register a transformer at the end of the call chain.

        :param transformer: Transformer to register.
        :raises DuplicateTransformerError: If this instance is already registered.
        """
        if any(existing is transformer for existing in self._transformers):
            raise DuplicateTransformerError(transformer.description)

        self._transformers.append(transformer)
        logger.debug(f"Registered transformer: {transformer.description}")

    def remove_transformer(self, transformer: Transformer) -> None:
        """Remove a previously registered transformer.

        :param transformer: Transformer to remove.
        :raises TransformerNotFoundError: If this instance is not registered.
        """
        for index, existing in enumerate(self._transformers):
            if existing is transformer:
                del self._transformers[index]
                logger.debug(f"Removed transformer: {transformer.description}")
                return

        raise TransformerNotFoundError(transformer.description)

    def call(self, method: APIMethod, payload: Payload | None = None) -> dict[str, Any]:
        """Invoke an API method through the transformer chain.

        :param method: The API method to call.
        :param payload: Request payload, if the method takes parameters.
        :returns: The decoded API response.
        :raises TelegramClientError: If the API request fails.
        """
        caller: APICaller = self._send
        for transformer in reversed(self.transformers):
            caller = partial(transformer.transform, caller)
        return caller(method, payload)

    def send_message(
        self,
        text: str,
        chat_id: str | None = None,
        **params: Any,
    ) -> SendMessageResult:
        """Send a text message to a chat.

        Formatting is left to the registered transformers, so no parse mode
        is set here unless passed explicitly in ``params``.

        :param text: The message text to send.
        :param chat_id: Target chat ID. If not provided, uses the configured chat_id.
        :param params: Extra sendMessage parameters.
        :returns: Result containing message_id and chat_id.
        :raises TelegramClientError: If the API request fails.
        :raises ValueError: If no chat_id is provided or configured.
        """
        target_chat_id = chat_id or self._chat_id
        if not target_chat_id:
            raise ValueError(
                "No chat_id provided. Set TELEGRAM_CHAT_ID environment variable, "
                "pass chat_id to constructor, or provide chat_id parameter."
            )

        logger.info(f"Sending message to chat_id={target_chat_id}")
        payload = Payload(params={"chat_id": target_chat_id, "text": text, **params})
        response = self.call(APIMethod.SEND_MESSAGE, payload)

        try:
            message = TelegramMessage.model_validate(response.get("result"))
        except ValidationError as e:
            raise TelegramClientError(f"Unexpected sendMessage result: {e}") from e

        logger.info(
            f"Message sent successfully: message_id={message.message_id}, "
            f"chat_id={target_chat_id}"
        )
        return SendMessageResult(message_id=message.message_id, chat_id=message.chat.id)

    def _send(self, method: APIMethod, payload: Payload | None) -> dict[str, Any]:
        """Send the request over HTTP. This is the last link of the chain.

        :param method: The API method to call.
        :param payload: Request payload as produced by the transformers.
        :returns: The decoded API response.
        :raises TelegramClientError: If the request fails or the API reports an error.
        """
        url = f"{self._base_url}/{method}"
        payload = payload or Payload()
        logger.debug(f"Calling Telegram API: method={method}, files={len(payload.files)}")

        try:
            if payload.files:
                response = requests.post(
                    url,
                    data=_encode_form_fields(payload.params),
                    files=payload.files,
                    timeout=self._request_timeout,
                )
            else:
                response = requests.post(url, json=payload.params, timeout=self._request_timeout)
            response.raise_for_status()

            data = response.json()
            result = TelegramResponse.model_validate(data)
            if not result.ok:
                error_description = result.description or "Unknown error"
                raise TelegramClientError(f"Telegram API returned error: {error_description}")

            return data

        except requests.exceptions.Timeout as e:
            raise TelegramClientError(
                f"Telegram API request timed out after {self._request_timeout}s"
            ) from e
        except requests.exceptions.RequestException as e:
            raise TelegramClientError(f"Telegram API request failed: {e}") from e
        except ValidationError as e:
            raise TelegramClientError(f"Telegram API returned an invalid response: {e}") from e


def _encode_form_fields(params: dict[str, Any]) -> dict[str, Any]:
    """Encode params for a multipart request.

    Nested objects must be sent as JSON strings alongside file uploads.
    """
    return {
        key: json.dumps(value) if isinstance(value, dict | list) else value
        for key, value in params.items()
    }
