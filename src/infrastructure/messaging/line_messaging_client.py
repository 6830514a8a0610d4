"""
Infrastructure adapter: LINE Messaging API reply endpoint → IMessagingClient.
All linebot.v3.messaging details are confined here.

The async API client holds an aiohttp session, so it is created on the first
reply (inside the running event loop) rather than at composition time.
"""

import logging
from typing import Optional

from linebot.v3.messaging import (
    AsyncApiClient,
    AsyncMessagingApi,
    Configuration,
    ReplyMessageRequest,
    TextMessage,
)

from src.domain.ports.messaging_port import IMessagingClient

logger = logging.getLogger(__name__)

# LINE rejects text messages longer than this.
MAX_TEXT_LENGTH = 5000
TRUNCATION_MARK = "…"


class LineMessagingClient(IMessagingClient):
    """Sends replies through the LINE Messaging API."""

    def __init__(self, channel_access_token: str) -> None:
        self._configuration = Configuration(access_token=channel_access_token)
        self._api_client: Optional[AsyncApiClient] = None
        self._api: Optional[AsyncMessagingApi] = None

    def _messaging_api(self) -> AsyncMessagingApi:
        if self._api is None:
            self._api_client = AsyncApiClient(self._configuration)
            self._api = AsyncMessagingApi(self._api_client)
        return self._api

    async def reply_text(self, reply_token: str, text: str) -> None:
        await self._messaging_api().reply_message(
            ReplyMessageRequest(
                reply_token=reply_token,
                messages=[TextMessage(text=fit_text(text))],
            )
        )

    async def close(self) -> None:
        if self._api_client is not None:
            await self._api_client.close()
            self._api_client = None
            self._api = None


def fit_text(text: str) -> str:
    """Cut *text* to LINE's length limit, marking the cut with an ellipsis."""
    if len(text) <= MAX_TEXT_LENGTH:
        return text
    logger.warning("Reply of %d characters truncated to %d", len(text), MAX_TEXT_LENGTH)
    return text[: MAX_TEXT_LENGTH - len(TRUNCATION_MARK)] + TRUNCATION_MARK
