"""Tests for Telegram configuration module."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from parse_mode_setter.telegram.utils.config import TelegramConfig, get_telegram_settings


class TestTelegramConfig(unittest.TestCase):
    """Tests for TelegramConfig class."""

    def test_valid_settings(self) -> None:
        """Test creating settings with valid values."""
        settings = TelegramConfig(bot_token="test-token", _env_file=None)

        self.assertEqual(settings.bot_token, "test-token")
        self.assertIsNone(settings.chat_id)
        self.assertEqual(settings.request_timeout, 30)

    def test_custom_values(self) -> None:
        """Test settings with custom values."""
        settings = TelegramConfig(
            bot_token="test-token",
            chat_id="12345",
            request_timeout=60,
            _env_file=None,
        )

        self.assertEqual(settings.chat_id, "12345")
        self.assertEqual(settings.request_timeout, 60)

    def test_missing_bot_token_raises_error(self) -> None:
        """Test that missing bot_token raises validation error."""
        with patch.dict(os.environ, {}, clear=True), self.assertRaises(ValidationError) as context:
            TelegramConfig(_env_file=None)

        errors = context.exception.errors()
        self.assertTrue(any(e["loc"] == ("bot_token",) for e in errors))

    def test_request_timeout_bounds(self) -> None:
        """Test that request_timeout must be between 1 and 120."""
        with self.assertRaises(ValidationError):
            TelegramConfig(bot_token="test-token", request_timeout=0, _env_file=None)

        with self.assertRaises(ValidationError):
            TelegramConfig(bot_token="test-token", request_timeout=121, _env_file=None)

    def test_load_from_environment(self) -> None:
        """Test loading settings from TELEGRAM_ environment variables."""
        env = {
            "TELEGRAM_BOT_TOKEN": "env-token",
            "TELEGRAM_CHAT_ID": "777",
            "TELEGRAM_REQUEST_TIMEOUT": "15",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = TelegramConfig(_env_file=None)

        self.assertEqual(settings.bot_token, "env-token")
        self.assertEqual(settings.chat_id, "777")
        self.assertEqual(settings.request_timeout, 15)


class TestGetTelegramSettings(unittest.TestCase):
    """Tests for get_telegram_settings function."""

    def setUp(self) -> None:
        """Clear the settings cache."""
        get_telegram_settings.cache_clear()

    def tearDown(self) -> None:
        """Clear the settings cache."""
        get_telegram_settings.cache_clear()

    def test_returns_cached_instance(self) -> None:
        """Test that settings are loaded once and cached."""
        with patch.dict(os.environ, {"TELEGRAM_BOT_TOKEN": "cached-token"}):
            first = get_telegram_settings()
            second = get_telegram_settings()

        self.assertIs(first, second)
        self.assertEqual(first.bot_token, "cached-token")


if __name__ == "__main__":
    unittest.main()
