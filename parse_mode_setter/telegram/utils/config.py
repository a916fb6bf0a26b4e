"""Configuration for the Telegram client using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from parse_mode_setter.paths import ENV_FILE


class TelegramConfig(BaseSettings):
    """Configuration for the Telegram client.

    All settings are loaded from environment variables with the TELEGRAM_ prefix.

    :param bot_token: Telegram bot token from @BotFather.
    :param chat_id: Default chat ID for sending messages.
    :param request_timeout: Timeout in seconds for each API request.
    """

    model_config = SettingsConfigDict(
        env_prefix="TELEGRAM_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    bot_token: str = Field(..., description="Bot token from @BotFather")
    chat_id: str | None = Field(
        default=None,
        description="Default chat ID for sending messages",
    )
    request_timeout: int = Field(
        default=30,
        ge=1,
        le=120,
        description="API request timeout in seconds",
    )


@lru_cache
def get_telegram_settings() -> TelegramConfig:
    """Get cached Telegram settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured TelegramConfig instance.
    """
    return TelegramConfig()  # type: ignore[call-arg]
