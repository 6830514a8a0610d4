"""
LangGraph state for the per-event analysis pipeline.
langgraph is the orchestration framework and is allowed in the application layer.
"""

from typing import Optional, TypedDict

from src.domain.entities.market_data import FundamentalsSnapshot, PricePoint
from src.domain.entities.ticker_extraction import TickerExtraction


class PipelineState(TypedDict, total=False):
    """Request-scoped state threaded through every node of the pipeline.

    text:         the user's raw message.
    reply_token:  messaging-platform token the reply is sent against.
    extraction:   result of the intent-extraction step.
    history:      daily bars, or None when the quotes provider failed.
    fundamentals: fundamentals snapshot, or None when the quotes provider failed.
    reply_text:   final text to send.
    outcome:      short label reported back in the webhook response.
    """

    text: str
    reply_token: str
    extraction: TickerExtraction
    history: Optional[list[PricePoint]]
    fundamentals: Optional[FundamentalsSnapshot]
    reply_text: str
    outcome: str
