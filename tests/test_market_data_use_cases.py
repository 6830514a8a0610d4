"""
Unit tests for GetPriceHistoryUseCase and GetFundamentalsUseCase.
"""

import json
from datetime import date

import pytest

from src.application.use_cases.get_fundamentals import GetFundamentalsUseCase
from src.application.use_cases.get_price_history import GetPriceHistoryUseCase
from tests.fakes import FakeStockDataProvider, price_points, tsmc_snapshot


class TestGetPriceHistory:
    @pytest.mark.asyncio
    async def test_window_is_two_months_ending_today(self):
        provider = FakeStockDataProvider()
        use_case = GetPriceHistoryUseCase(provider)

        await use_case.execute("2330.TW", today=date(2024, 3, 15))

        assert provider.history_requests == [("2330.TW", date(2024, 1, 15), date(2024, 3, 15))]

    @pytest.mark.asyncio
    async def test_window_clamps_to_end_of_shorter_month(self):
        provider = FakeStockDataProvider()
        use_case = GetPriceHistoryUseCase(provider)

        await use_case.execute("AAPL", today=date(2024, 4, 30))

        assert provider.history_requests[0][1] == date(2024, 2, 29)

    @pytest.mark.asyncio
    async def test_result_is_ordered_oldest_first(self):
        points = price_points(5)
        provider = FakeStockDataProvider(history=list(reversed(points)))
        use_case = GetPriceHistoryUseCase(provider)

        result = await use_case.execute("2330.TW", today=date(2024, 5, 31))

        dates = [p.date for p in result]
        assert dates == sorted(dates)
        assert all(
            None not in (p.open, p.high, p.low, p.close) for p in result
        )

    @pytest.mark.asyncio
    async def test_provider_error_yields_none(self, caplog):
        provider = FakeStockDataProvider(history=ValueError("no data"))
        use_case = GetPriceHistoryUseCase(provider)

        result = await use_case.execute("XXXX.TW", today=date(2024, 5, 31))

        assert result is None
        assert "Error fetching historical data for XXXX.TW" in caplog.text


class TestGetFundamentals:
    @pytest.mark.asyncio
    async def test_returns_snapshot(self):
        provider = FakeStockDataProvider()
        use_case = GetFundamentalsUseCase(provider)

        result = await use_case.execute("2330.TW")

        assert result == tsmc_snapshot()
        assert provider.fundamentals_requests == ["2330.TW"]

    @pytest.mark.asyncio
    async def test_provider_error_yields_none(self, caplog):
        provider = FakeStockDataProvider(fundamentals=RuntimeError("HTTP 404"))
        use_case = GetFundamentalsUseCase(provider)

        result = await use_case.execute("XXXX.TW")

        assert result is None
        assert "Error fetching data for XXXX.TW" in caplog.text


def test_snapshot_serialization_round_trips_through_json():
    snapshot = tsmc_snapshot()

    decoded = json.loads(json.dumps(snapshot.to_dict(), ensure_ascii=False))

    assert decoded["companyName"].startswith("Taiwan Semiconductor")
    assert decoded["numberOfAnalystOpinions"] == 34
    assert decoded["quarterlyEarnings"] == {"3Q2023": 8.14, "4Q2023": 9.21, "1Q2024": 8.7}
