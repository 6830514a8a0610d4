"""
Use-case: retrieve a fundamentals snapshot for a symbol.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import asyncio
import json
import logging
from typing import Optional

from src.domain.entities.market_data import FundamentalsSnapshot
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)


class GetFundamentalsUseCase:
    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    async def execute(self, symbol: str) -> Optional[FundamentalsSnapshot]:
        """Fetch fundamentals for *symbol*, or None if the provider failed."""
        try:
            snapshot = await asyncio.to_thread(self._provider.get_fundamentals, symbol)
        except Exception:
            logger.exception("Error fetching data for %s", symbol)
            return None

        logger.info(
            "%s stock data:\n%s",
            symbol,
            json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2),
        )
        return snapshot
