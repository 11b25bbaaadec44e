"""Housing market conditions: price projection and threshold alerts."""

from dataclasses import dataclass
from enum import Enum

from nestegg.core.exceptions import InvalidInputError
from nestegg.financial.validation import compound, require_non_negative, require_number

HIGH_PRICE_GROWTH = 0.06
HIGH_INTEREST_RATE = 0.07
HIGH_PROPERTY_TAX = 0.02


class AlertLevel(Enum):
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class MarketConditions:
    """Local market figures; rates are annual fractions."""

    home_price: float
    interest_rate: float
    price_growth: float
    tax_rate: float
    insurance_rate: float = 0.0

    def __post_init__(self):
        require_non_negative("home_price", self.home_price)
        require_non_negative("interest_rate", self.interest_rate)
        # Prices can fall
        require_number("price_growth", self.price_growth)
        require_non_negative("tax_rate", self.tax_rate)
        require_non_negative("insurance_rate", self.insurance_rate)


@dataclass(frozen=True)
class MarketAlert:
    message: str
    level: AlertLevel


def project_home_price(home_price: float, price_growth: float, years: int = 1) -> float:
    """Price after ``years`` of compound growth at ``price_growth`` per year."""
    home_price = require_non_negative("home_price", home_price)
    price_growth = require_number("price_growth", price_growth)
    if isinstance(years, bool) or not isinstance(years, int) or years < 0:
        raise InvalidInputError("years", years, "must be a whole number >= 0")
    projected = require_number("projected_price", home_price * compound("years", 1 + price_growth, years))
    return max(0.0, projected)


def market_alerts(conditions: MarketConditions) -> list[MarketAlert]:
    """Alerts for conditions that should change a buyer's timing."""
    alerts = []
    if conditions.price_growth > HIGH_PRICE_GROWTH:
        alerts.append(MarketAlert("High price growth rate - consider buying soon", AlertLevel.WARNING))
    if conditions.interest_rate > HIGH_INTEREST_RATE:
        alerts.append(MarketAlert("Interest rates are elevated - monitor for decreases", AlertLevel.INFO))
    if conditions.tax_rate > HIGH_PROPERTY_TAX:
        alerts.append(MarketAlert("High property tax rate in this area", AlertLevel.WARNING))
    return alerts
