"""
Domain entity for one messaging-platform webhook event.
Zero external dependencies: pure Python dataclass only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InboundEvent:
    event_type: str
    message_type: Optional[str] = None
    text: Optional[str] = None
    reply_token: Optional[str] = None

    @property
    def is_text_message(self) -> bool:
        return self.event_type == "message" and self.message_type == "text"


@dataclass(frozen=True)
class EventResult:
    """Outcome of one handled text-message event, returned in the webhook response."""

    outcome: str
    symbol: Optional[str] = None
