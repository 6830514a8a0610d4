"""
Use-case: handle every event of one webhook delivery concurrently.
Depends only on Domain entities and the per-event use case.
"""

import asyncio
import dataclasses
from typing import Optional

from src.application.use_cases.handle_message_event import HandleMessageEventUseCase
from src.domain.entities.inbound_event import InboundEvent


class HandleWebhookUseCase:
    def __init__(self, event_handler: HandleMessageEventUseCase) -> None:
        self._event_handler = event_handler

    async def execute(self, events: list[InboundEvent]) -> list[Optional[dict]]:
        """Run all per-event handlers concurrently and wait for every one.

        Results keep the order of *events*. The first handler failure is
        re-raised; sibling handlers are not cancelled and replies they have
        already sent stay sent.
        """
        results = await asyncio.gather(
            *(self._event_handler.execute(event) for event in events)
        )
        return [
            dataclasses.asdict(result) if result is not None else None
            for result in results
        ]
