"""
Infrastructure adapter: yfinance → IStockDataProvider.
All yfinance-specific details (ticker.info, earnings_history, history()) are
confined here; the rest of the codebase depends only on IStockDataProvider.
"""

import logging
from datetime import date, timedelta
from typing import Any, Optional

import pandas as pd
import yfinance as yf

from src.domain.entities.market_data import FundamentalsSnapshot, PricePoint
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)

_OHLC_COLUMNS = ("Open", "High", "Low", "Close")


class YFinanceStockDataProvider(IStockDataProvider):
    """Fetches stock market data from Yahoo Finance via the yfinance library."""

    def __init__(self, _ticker_factory=yf.Ticker) -> None:
        self._ticker_factory = _ticker_factory

    def get_historical_prices(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PricePoint]:
        ticker = self._ticker_factory(symbol)
        # yfinance treats `end` as exclusive.
        history = ticker.history(
            start=start_date.isoformat(),
            end=(end_date + timedelta(days=1)).isoformat(),
            interval="1d",
        )

        if history is None or history.empty:
            raise ValueError(f"No historical data available for symbol: {symbol!r}")

        records = [
            PricePoint(
                date=index.strftime("%Y-%m-%d"),
                open=round(float(row["Open"]), 4),
                high=round(float(row["High"]), 4),
                low=round(float(row["Low"]), 4),
                close=round(float(row["Close"]), 4),
            )
            for index, row in history.iterrows()
            if not any(pd.isna(row.get(column)) for column in _OHLC_COLUMNS)
        ]
        if not records:
            raise ValueError(f"No complete OHLC rows for symbol: {symbol!r}")
        return sorted(records, key=lambda record: record.date)

    def get_fundamentals(self, symbol: str) -> FundamentalsSnapshot:
        ticker = self._ticker_factory(symbol)
        info = ticker.info or {}

        company_name = info.get("longName") or info.get("shortName")
        current_price = _number(info.get("currentPrice"))
        if current_price is None:
            current_price = _number(info.get("regularMarketPrice"))
        if company_name is None and current_price is None:
            raise ValueError(f"No fundamentals available for symbol: {symbol!r}")

        opinions = info.get("numberOfAnalystOpinions")
        return FundamentalsSnapshot(
            symbol=symbol,
            company_name=company_name,
            current_price=current_price,
            target_high_price=_number(info.get("targetHighPrice")),
            target_low_price=_number(info.get("targetLowPrice")),
            target_mean_price=_number(info.get("targetMeanPrice")),
            number_of_analyst_opinions=int(opinions) if _number(opinions) is not None else None,
            recommendation_mean=_number(info.get("recommendationMean")),
            revenue_per_share=_number(info.get("revenuePerShare")),
            return_on_assets=_number(info.get("returnOnAssets")),
            return_on_equity=_number(info.get("returnOnEquity")),
            gross_profits=_number(info.get("grossProfits")),
            gross_margins=_number(info.get("grossMargins")),
            ebitda_margins=_number(info.get("ebitdaMargins")),
            operating_margins=_number(info.get("operatingMargins")),
            quarterly_earnings=self._quarterly_earnings(ticker, symbol),
        )

    @staticmethod
    def _quarterly_earnings(ticker: Any, symbol: str) -> dict[str, Optional[float]]:
        """Map quarter label (e.g. "2Q2024") to reported EPS, oldest first.

        Quarterly data is optional: its absence leaves the mapping empty.
        """
        try:
            earnings = ticker.earnings_history
        except Exception:
            logger.warning("Quarterly earnings unavailable for %s", symbol, exc_info=True)
            return {}

        if earnings is None or getattr(earnings, "empty", True) or "epsActual" not in earnings:
            return {}

        quarterly: dict[str, Optional[float]] = {}
        for quarter, actual in earnings["epsActual"].sort_index().items():
            quarterly[quarter_label(pd.Timestamp(quarter))] = _number(actual)
        return quarterly


def quarter_label(timestamp: pd.Timestamp) -> str:
    return f"{timestamp.quarter}Q{timestamp.year}"


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if pd.isna(number):
        return None
    return number
