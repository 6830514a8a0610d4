"""
Use-case: retrieve the trailing two months of daily OHLC bars for a symbol.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import asyncio
import json
import logging
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from src.domain.entities.market_data import PricePoint
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)

HISTORY_WINDOW = relativedelta(months=2)


class GetPriceHistoryUseCase:
    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    async def execute(
        self,
        symbol: str,
        today: Optional[date] = None,
    ) -> Optional[list[PricePoint]]:
        """Fetch daily bars for *symbol* over [today - 2 months, today].

        Provider failures are logged and reported as None so the pipeline can
        carry on with a "data unavailable" placeholder.

        Args:
            symbol: Ticker symbol, already normalised by the extractor.
            today:  End of the window. Defaults to the current date.

        Returns:
            Bars ordered oldest first, or None if the provider failed.
        """
        end_date = today or date.today()
        start_date = end_date - HISTORY_WINDOW
        try:
            points = await asyncio.to_thread(
                self._provider.get_historical_prices,
                symbol,
                start_date,
                end_date,
            )
        except Exception:
            logger.exception("Error fetching historical data for %s", symbol)
            return None

        points = sorted(points, key=lambda p: p.date)
        logger.info(
            "%s historical data:\n%s",
            symbol,
            json.dumps([p.to_dict() for p in points], ensure_ascii=False, indent=2),
        )
        return points
