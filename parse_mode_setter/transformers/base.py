"""Base classes for API call transformers.

A transformer is one link of the outgoing call chain of a TelegramClient.
It receives the next link as a callable, may rewrite the payload, and must
hand the call on exactly once.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from parse_mode_setter.enums import APIMethod
from parse_mode_setter.telegram.payload import Payload

APICaller = Callable[[APIMethod, Payload | None], dict[str, Any]]


class Transformer(ABC):
    """Abstract base class for outgoing call transformers."""

    @property
    def description(self) -> str:
        """Human-readable summary used in logs and registry errors."""
        return type(self).__name__

    @abstractmethod
    def transform(
        self,
        call: APICaller,
        method: APIMethod,
        payload: Payload | None = None,
    ) -> dict[str, Any]:
        """Process one outgoing call and forward it.

        :param call: The next link of the chain (or the transport itself).
        :param method: The API method being invoked.
        :param payload: The request payload, if any.
        :returns: Whatever ``call`` returned, unmodified.
        """
        ...
