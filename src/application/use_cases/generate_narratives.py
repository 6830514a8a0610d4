"""
Use-case: ask the language model for a technical and a fundamentals write-up.
Depends only on Domain ports and entities; langchain_core messages are framework.
Model output is treated as opaque text.
"""

from typing import Any, Optional

from langchain_core.messages import HumanMessage, SystemMessage

from src.application.pipeline.prompts import (
    FUNDAMENTALS_ANALYSIS_INSTRUCTION,
    FUNDAMENTALS_ANALYST_PERSONA,
    TECHNICAL_ANALYSIS_INSTRUCTION,
    TECHNICAL_ANALYST_PERSONA,
    format_fundamentals,
    format_price_history,
)
from src.domain.entities.market_data import FundamentalsSnapshot, PricePoint
from src.domain.entities.narrative_reply import NarrativeReply
from src.domain.ports.llm_port import ILanguageModel


class GenerateNarrativesUseCase:
    def __init__(self, llm: ILanguageModel) -> None:
        self._llm = llm

    async def execute(
        self,
        history: Optional[list[PricePoint]],
        fundamentals: Optional[FundamentalsSnapshot],
    ) -> NarrativeReply:
        """Run the technical call, then the fundamentals call.

        Raises:
            Any exception propagated from ILanguageModel on API failure.
        """
        technical = await self._ask(
            TECHNICAL_ANALYST_PERSONA,
            TECHNICAL_ANALYSIS_INSTRUCTION + format_price_history(history),
        )
        summary = await self._ask(
            FUNDAMENTALS_ANALYST_PERSONA,
            FUNDAMENTALS_ANALYSIS_INSTRUCTION + format_fundamentals(fundamentals),
        )
        return NarrativeReply(technical=technical, fundamentals=summary)

    async def _ask(self, persona: str, content: str) -> str:
        response = await self._llm.ainvoke(
            [
                SystemMessage(content=persona),
                HumanMessage(content=content),
            ]
        )
        return message_text(response)


def message_text(message: Any) -> str:
    """Flatten a chat message's content to plain text.

    Some providers return content as a list of blocks rather than a string.
    """
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)
