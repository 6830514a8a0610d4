"""
Domain entities for quotes-provider data.
Zero external dependencies: pure Python dataclasses only.

Field names of the serialized forms follow the quotes provider's own
naming so the model sees familiar keys.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class PricePoint:
    date: str
    open: float
    high: float
    low: float
    close: float

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
        }


@dataclass(frozen=True)
class FundamentalsSnapshot:
    symbol: str
    company_name: Optional[str] = None
    current_price: Optional[float] = None
    target_high_price: Optional[float] = None
    target_low_price: Optional[float] = None
    target_mean_price: Optional[float] = None
    number_of_analyst_opinions: Optional[int] = None
    recommendation_mean: Optional[float] = None
    revenue_per_share: Optional[float] = None
    return_on_assets: Optional[float] = None
    return_on_equity: Optional[float] = None
    gross_profits: Optional[float] = None
    gross_margins: Optional[float] = None
    ebitda_margins: Optional[float] = None
    operating_margins: Optional[float] = None
    # Quarter label (e.g. "2Q2024") -> reported EPS actual, oldest first.
    quarterly_earnings: dict[str, Optional[float]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "companyName": self.company_name,
            "currentPrice": self.current_price,
            "targetHighPrice": self.target_high_price,
            "targetLowPrice": self.target_low_price,
            "targetMeanPrice": self.target_mean_price,
            "numberOfAnalystOpinions": self.number_of_analyst_opinions,
            "recommendationMean": self.recommendation_mean,
            "revenuePerShare": self.revenue_per_share,
            "returnOnAssets": self.return_on_assets,
            "returnOnEquity": self.return_on_equity,
            "grossProfits": self.gross_profits,
            "grossMargins": self.gross_margins,
            "ebitdaMargins": self.ebitda_margins,
            "operatingMargins": self.operating_margins,
            "quarterlyEarnings": dict(self.quarterly_earnings),
        }
