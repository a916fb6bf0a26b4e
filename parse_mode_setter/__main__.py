"""Send a demo message with the parse mode set by the plugin.

Run with: python -m parse_mode_setter

The parse mode comes from PARSE_MODE_SETTER_PARSE_MODE and defaults to HTML.
"""

import logging

from pydantic import ValidationError

from parse_mode_setter.enums import ParseMode
from parse_mode_setter.observability.sentry import init_sentry
from parse_mode_setter.plugin import ParseModeSetterPlugin
from parse_mode_setter.telegram.client import TelegramClient
from parse_mode_setter.transformers.config import ParseModeSetterConfig, get_parse_mode_settings
from parse_mode_setter.utils.logging import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_PARSE_MODE = ParseMode.HTML

DEMO_MESSAGES = {
    ParseMode.HTML: "Hello <b>World</b>, formatted by the <i>parse-mode-setter</i> plugin.",
    ParseMode.MARKDOWN: "Hello *World*, formatted by the _parse-mode-setter_ plugin.",
    ParseMode.MARKDOWN_V2: "Hello *World*, formatted by the _parse\\-mode\\-setter_ plugin\\.",
}


def load_config() -> ParseModeSetterConfig:
    """Load the plugin config from env, using HTML when no parse mode is set.

    :returns: The cached env config, or a default HTML config.
    :raises ValidationError: If the env holds an invalid value.
    """
    try:
        return get_parse_mode_settings()
    except ValidationError as e:
        missing_parse_mode = any(
            error["type"] == "missing" and error["loc"] == ("parse_mode",)
            for error in e.errors()
        )
        if not missing_parse_mode or e.error_count() > 1:
            raise

    logger.info(f"PARSE_MODE_SETTER_PARSE_MODE not set, using {DEFAULT_PARSE_MODE}")
    return ParseModeSetterConfig(parse_mode=DEFAULT_PARSE_MODE)


def main() -> None:
    """Install the plugin on a client from env settings and send a message."""
    configure_logging()
    init_sentry()

    config = load_config()
    client = TelegramClient.from_settings()
    ParseModeSetterPlugin(config).install(client)

    result = client.send_message(DEMO_MESSAGES[config.parse_mode])
    logger.info(f"Demo message sent: message_id={result.message_id}")


if __name__ == "__main__":
    main()
