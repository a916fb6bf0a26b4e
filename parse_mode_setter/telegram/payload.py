"""Request payload passed through the transformer chain."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Payload:
    """Body of a single outgoing Telegram API call.

    :param params: JSON-serialisable request parameters.
    :param files: Binary attachments keyed by field name. Transformers must
        leave these alone; they are only read by the transport.
    """

    params: dict[str, Any] = field(default_factory=dict)
    files: dict[str, Any] = field(default_factory=dict)

    def copy(self) -> "Payload":
        """Return a payload with a shallow copy of params and the same files.

        :returns: New Payload whose top-level params can be written freely.
        """
        return Payload(params=dict(self.params), files=self.files)
