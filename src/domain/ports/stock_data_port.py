"""
Port (interface) for stock data providers.
Infrastructure adapters (e.g. YFinanceStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from datetime import date

from src.domain.entities.market_data import FundamentalsSnapshot, PricePoint


class IStockDataProvider(ABC):
    @abstractmethod
    def get_historical_prices(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PricePoint]:
        """Return daily bars between *start_date* and *end_date* (both inclusive).

        Raises:
            ValueError: if the provider has no data for *symbol*.
        """
        ...

    @abstractmethod
    def get_fundamentals(self, symbol: str) -> FundamentalsSnapshot:
        """Return a point-in-time fundamentals snapshot for *symbol*.

        Raises:
            ValueError: if the provider has no data for *symbol*.
        """
        ...
