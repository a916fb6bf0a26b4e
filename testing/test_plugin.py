"""Tests for the parse mode setter plugin."""

import unittest
from unittest.mock import MagicMock, patch

from parse_mode_setter.enums import ParseMode
from parse_mode_setter.exceptions import DuplicateTransformerError, TransformerNotFoundError
from parse_mode_setter.plugin import ParseModeSetterPlugin
from parse_mode_setter.telegram.client import TelegramClient
from parse_mode_setter.transformers.config import ParseModeSetterConfig
from parse_mode_setter.transformers.parse_mode import ParseModeSetter


class TestParseModeSetterPlugin(unittest.TestCase):
    """Tests for ParseModeSetterPlugin."""

    def setUp(self) -> None:
        """Create a plugin and a client."""
        self.config = ParseModeSetterConfig(parse_mode=ParseMode.MARKDOWN_V2, _env_file=None)
        self.plugin = ParseModeSetterPlugin(self.config)
        self.client = TelegramClient(bot_token="test-token", chat_id="12345")

    def test_metadata(self) -> None:
        """Test plugin name, version, description and dependencies."""
        self.assertEqual(self.plugin.name, "parse-mode-setter")
        self.assertEqual(self.plugin.version, "1.0.0")
        self.assertIn("parse mode", self.plugin.description)
        self.assertEqual(self.plugin.dependencies, [])

    def test_transformer_is_stable(self) -> None:
        """Test that the same transformer instance is returned each time."""
        self.assertIsInstance(self.plugin.transformer, ParseModeSetter)
        self.assertIs(self.plugin.transformer, self.plugin.transformer)
        self.assertIs(self.plugin.transformer.config, self.config)

    def test_install_and_uninstall(self) -> None:
        """Test that uninstall removes exactly what install added."""
        self.plugin.install(self.client)
        self.assertEqual(self.client.transformers, (self.plugin.transformer,))

        self.plugin.uninstall(self.client)
        self.assertEqual(self.client.transformers, ())

    def test_install_twice_raises(self) -> None:
        """Test that installing twice on the same client raises."""
        self.plugin.install(self.client)

        with self.assertRaises(DuplicateTransformerError):
            self.plugin.install(self.client)

    def test_uninstall_without_install_raises(self) -> None:
        """Test that uninstalling from a client without the plugin raises."""
        with self.assertRaises(TransformerNotFoundError):
            self.plugin.uninstall(self.client)

    def test_two_plugins_chain(self) -> None:
        """Test that two plugins can be installed on one client."""
        other = ParseModeSetterPlugin(
            ParseModeSetterConfig(parse_mode=ParseMode.HTML, _env_file=None)
        )

        self.plugin.install(self.client)
        other.install(self.client)

        self.assertEqual(self.client.transformers, (self.plugin.transformer, other.transformer))

    @patch("parse_mode_setter.telegram.client.requests.post")
    def test_installed_plugin_sets_parse_mode(self, mock_post: MagicMock) -> None:
        """Test that messages sent after install carry the parse mode."""
        response = MagicMock()
        response.json.return_value = {
            "ok": True,
            "result": {"message_id": 1, "date": 0, "chat": {"id": 12345, "type": "private"}},
        }
        mock_post.return_value = response
        self.plugin.install(self.client)

        self.client.send_message("*bold*")

        self.assertEqual(mock_post.call_args.kwargs["json"]["parse_mode"], "MarkdownV2")


if __name__ == "__main__":
    unittest.main()
