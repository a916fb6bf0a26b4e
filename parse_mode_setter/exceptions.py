"""Custom exceptions for the parse mode setter package."""


class ParseModeSetterError(Exception):
    """Base exception for parse-mode-setter errors."""


class TransformerRegistryError(ParseModeSetterError):
    """Error related to registering or removing transformers on a client."""


class DuplicateTransformerError(TransformerRegistryError):
    """Raised when the same transformer instance is registered twice."""

    def __init__(self, description: str) -> None:
        """Initialise DuplicateTransformerError.

        :param description: Description of the duplicate transformer.
        """
        self.description = description
        super().__init__(f"Transformer '{description}' is already registered")


class TransformerNotFoundError(TransformerRegistryError):
    """Raised when removing a transformer that was never registered."""

    def __init__(self, description: str) -> None:
        """Initialise TransformerNotFoundError.

        :param description: Description of the missing transformer.
        """
        self.description = description
        super().__init__(f"Transformer '{description}' is not registered")


class TelegramClientError(ParseModeSetterError):
    """Raised when Telegram API request fails."""
