"""Tests for nestegg.financial.calculators.market."""

import pytest

from nestegg.core.exceptions import InvalidInputError
from nestegg.financial.calculators.market import (
    AlertLevel,
    MarketConditions,
    market_alerts,
    project_home_price,
)


class TestProjectHomePrice:
    def test_one_year(self):
        assert project_home_price(200_000, 0.04) == pytest.approx(208_000)

    def test_compounds(self):
        assert project_home_price(200_000, 0.04, years=2) == pytest.approx(216_320)

    def test_falling_market(self):
        assert project_home_price(200_000, -0.05) == pytest.approx(190_000)

    def test_negative_years_raises(self):
        with pytest.raises(InvalidInputError, match="years"):
            project_home_price(200_000, 0.04, years=-1)

    def test_runaway_growth_raises(self):
        with pytest.raises(InvalidInputError, match="years"):
            project_home_price(200_000, 1e10, years=100)

    def test_infinite_projection_raises(self):
        with pytest.raises(InvalidInputError, match="projected_price"):
            project_home_price(1e300, 1.0, years=100)


class TestMarketAlerts:
    def test_calm_market(self):
        conditions = MarketConditions(home_price=200_000, interest_rate=0.065, price_growth=0.04, tax_rate=0.015)
        assert market_alerts(conditions) == []

    def test_all_thresholds(self):
        conditions = MarketConditions(home_price=350_000, interest_rate=0.075, price_growth=0.08, tax_rate=0.025)
        alerts = market_alerts(conditions)
        assert [a.level for a in alerts] == [AlertLevel.WARNING, AlertLevel.INFO, AlertLevel.WARNING]
        assert "price growth" in alerts[0].message
        assert "Interest rates" in alerts[1].message
        assert "property tax" in alerts[2].message

    def test_threshold_is_exclusive(self):
        conditions = MarketConditions(home_price=200_000, interest_rate=0.07, price_growth=0.06, tax_rate=0.02)
        assert market_alerts(conditions) == []

    def test_negative_rate_raises(self):
        with pytest.raises(InvalidInputError, match="interest_rate"):
            MarketConditions(home_price=200_000, interest_rate=-0.01, price_growth=0.04, tax_rate=0.015)
