"""Installable plugin wrapping the parse mode setter transformer."""

import logging

from parse_mode_setter.telegram.client import TelegramClient
from parse_mode_setter.transformers.config import ParseModeSetterConfig
from parse_mode_setter.transformers.parse_mode import ParseModeSetter

logger = logging.getLogger(__name__)


class ParseModeSetterPlugin:
    """Plugin that sets the parse mode on every eligible API call of a client.

    Example::

        client = TelegramClient.from_settings()
        plugin = ParseModeSetterPlugin(ParseModeSetterConfig(parse_mode=ParseMode.HTML))
        plugin.install(client)
        client.send_message("<b>Hello</b>")  # sent with parse_mode=HTML
    """

    name = "parse-mode-setter"
    version = "1.0.0"
    description = "Automatically sets parse mode for API methods that support text formatting"

    def __init__(self, config: ParseModeSetterConfig) -> None:
        """Initialise the plugin.

        :param config: Parse mode and method eligibility settings.
        """
        self._transformer = ParseModeSetter(config)

    @property
    def dependencies(self) -> list[str]:
        """Names of plugins that must be installed before this one."""
        return []

    @property
    def transformer(self) -> ParseModeSetter:
        """Get the transformer this plugin installs."""
        return self._transformer

    def install(self, client: TelegramClient) -> None:
        """Register the transformer on a client.

        :param client: Client whose calls should get the parse mode.
        :raises DuplicateTransformerError: If already installed on this client.
        """
        client.use(self._transformer)
        logger.info(f"Installed plugin {self.name} v{self.version}")

    def uninstall(self, client: TelegramClient) -> None:
        """Remove the transformer from a client.

        :param client: Client the plugin was installed on.
        :raises TransformerNotFoundError: If not installed on this client.
        """
        client.remove_transformer(self._transformer)
        logger.info(f"Uninstalled plugin {self.name}")
