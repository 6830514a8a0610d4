"""
Use-case: ask the language model which traded symbol a user's message refers to.
Depends only on Domain ports and entities; langchain_core messages are framework.

The model is offered exactly one function (Get_stock_name_and_code) with
automatic selection. Its reply is classified into a TickerExtraction so every
shape of answer drives an explicit pipeline branch instead of a parse error.
"""

import logging
from typing import Any

from langchain_core.messages import HumanMessage, SystemMessage

from src.application.pipeline.prompts import (
    DEFAULT_ASSISTANT_PERSONA,
    STOCK_LOOKUP_FUNCTION,
    STOCK_LOOKUP_FUNCTION_NAME,
)
from src.domain.entities.ticker_extraction import ExtractionStatus, TickerExtraction
from src.domain.ports.llm_port import ILanguageModel

logger = logging.getLogger(__name__)

UNDEFINED_TICKER = "undefined"


class ExtractTickerUseCase:
    def __init__(self, llm: ILanguageModel, persona: str = DEFAULT_ASSISTANT_PERSONA) -> None:
        self._llm = llm.bind_tools([STOCK_LOOKUP_FUNCTION], tool_choice="auto")
        self._persona = persona

    async def execute(self, text: str) -> TickerExtraction:
        """Extract a ticker from *text*.

        Raises:
            Any exception propagated from ILanguageModel on API failure.
        """
        response = await self._llm.ainvoke(
            [
                SystemMessage(content=self._persona),
                HumanMessage(content=text),
            ]
        )
        extraction = classify_response(response)
        logger.debug("Ticker extraction input: %r", text)
        logger.info(
            "Ticker extraction for %d-character message: status=%s symbol=%s",
            len(text),
            extraction.status.value,
            extraction.symbol,
        )
        return extraction


def classify_response(response: Any) -> TickerExtraction:
    """Turn a chat-model response message into a TickerExtraction."""
    tool_calls = getattr(response, "tool_calls", None) or []
    invalid_calls = getattr(response, "invalid_tool_calls", None) or []

    if not tool_calls:
        if invalid_calls:
            return TickerExtraction(
                status=ExtractionStatus.MALFORMED_ARGUMENTS,
                detail=invalid_calls[0].get("error") or "unparsable function arguments",
            )
        return TickerExtraction(status=ExtractionStatus.NO_FUNCTION_CALL)

    call = next(
        (c for c in tool_calls if c.get("name") == STOCK_LOOKUP_FUNCTION_NAME),
        None,
    )
    if call is None:
        return TickerExtraction(
            status=ExtractionStatus.MALFORMED_ARGUMENTS,
            detail=f"unexpected function {tool_calls[0].get('name')!r}",
        )

    args = call.get("args")
    if not isinstance(args, dict):
        return TickerExtraction(
            status=ExtractionStatus.MALFORMED_ARGUMENTS,
            detail="function arguments are not an object",
        )

    code = args.get("market_code")
    if not isinstance(code, str) or not code.strip():
        return TickerExtraction(
            status=ExtractionStatus.MALFORMED_ARGUMENTS,
            detail="market_code missing or not a string",
        )

    name = args.get("market_name")
    name = name.strip() if isinstance(name, str) and name.strip() else None

    code = code.strip()
    if code.lower() == UNDEFINED_TICKER:
        return TickerExtraction(status=ExtractionStatus.UNKNOWN_TICKER, name=name)

    return TickerExtraction(status=ExtractionStatus.VALID, symbol=code.upper(), name=name)
