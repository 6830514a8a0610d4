"""
Use-case: run one webhook event through the compiled analysis pipeline.
langchain_core / langgraph are treated as framework because LangGraph is the
orchestration framework used throughout the application layer.
"""

import logging
from typing import Any, Optional

from src.domain.entities.inbound_event import EventResult, InboundEvent
from src.domain.ports.observability_port import IObservabilityHandler

logger = logging.getLogger(__name__)


class HandleMessageEventUseCase:
    def __init__(self, pipeline: Any, observability: IObservabilityHandler) -> None:
        """
        Args:
            pipeline:      Compiled LangGraph graph returned by build_event_pipeline().
            observability: IObservabilityHandler implementation (e.g. Langfuse adapter).
        """
        self._pipeline = pipeline
        self._observability = observability

    async def execute(self, event: InboundEvent) -> Optional[EventResult]:
        """Handle a single event.

        Non-text events are ignored: no outbound call is made and None is returned.

        Raises:
            Any exception from the language model or the reply API.
        """
        if not event.is_text_message:
            logger.info(
                "Ignoring %s event (message type %s)", event.event_type, event.message_type
            )
            return None

        config: dict = {"metadata": {"langfuse_tags": ["line-stock-webhook"]}}
        callback = self._observability.as_callback()
        if callback is not None:
            config["callbacks"] = [callback]

        state = await self._pipeline.ainvoke(
            {"text": event.text or "", "reply_token": event.reply_token},
            config=config,
        )
        extraction = state["extraction"]
        return EventResult(outcome=state["outcome"], symbol=extraction.symbol)
