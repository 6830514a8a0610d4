"""
Port (interface) for the messaging platform's outbound API.
Infrastructure adapters (e.g. LineMessagingClient) must implement this interface.
"""

from abc import ABC, abstractmethod


class IMessagingClient(ABC):
    @abstractmethod
    async def reply_text(self, reply_token: str, text: str) -> None:
        """Send a single text message as the reply to *reply_token*."""
        ...
