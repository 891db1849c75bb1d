"""Abstract SMS sender interface."""

from abc import ABC, abstractmethod
from typing import Any


class MessageSender(ABC):
    """Base class for SMS delivery providers."""

    @abstractmethod
    async def send(self, from_number: str, to: str, body: str) -> Any:
        """Send one SMS.

        Args:
            from_number: Sender phone number.
            to: Recipient phone number.
            body: Message text.

        Returns:
            The provider's delivery confirmation, unchanged.
        """
        ...
