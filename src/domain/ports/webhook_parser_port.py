"""
Port (interface) for verifying and parsing inbound webhook requests.
Infrastructure adapters (e.g. LineWebhookParser) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.inbound_event import InboundEvent


class IWebhookParser(ABC):
    @abstractmethod
    def parse(self, body: str, signature: str) -> list[InboundEvent]:
        """Verify *signature* against *body* and return the events it carries.

        Raises:
            ValueError: if the signature does not match or the body is not a
                        valid webhook payload.
        """
        ...
