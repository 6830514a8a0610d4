"""
Infrastructure adapter: LINE Messaging API webhook → IWebhookParser.

Signature verification (HMAC-SHA256 of the raw body keyed by the channel
secret, carried in X-Line-Signature) and event decoding are delegated to
line-bot-sdk; SDK event models are converted to InboundEvent here so the
rest of the codebase never imports linebot.
"""

from typing import Any

from linebot.v3 import WebhookParser
from linebot.v3.exceptions import InvalidSignatureError

from src.domain.entities.inbound_event import InboundEvent
from src.domain.ports.webhook_parser_port import IWebhookParser


class LineWebhookParser(IWebhookParser):
    """Verifies and decodes LINE webhook deliveries."""

    def __init__(self, channel_secret: str) -> None:
        self._parser = WebhookParser(channel_secret)

    def parse(self, body: str, signature: str) -> list[InboundEvent]:
        try:
            events = self._parser.parse(body, signature)
        except InvalidSignatureError as exc:
            raise ValueError("Invalid signature") from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Malformed webhook payload: {exc}") from exc
        return [self._to_inbound_event(event) for event in events]

    @staticmethod
    def _to_inbound_event(event: Any) -> InboundEvent:
        message = getattr(event, "message", None)
        return InboundEvent(
            event_type=getattr(event, "type", None) or "unknown",
            message_type=getattr(message, "type", None),
            text=getattr(message, "text", None),
            reply_token=getattr(event, "reply_token", None),
        )
