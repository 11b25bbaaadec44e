"""Pydantic models for user defaults.

``Config.user_settings()`` validates the ``defaults`` section of the config
into a typed ``UserSettings`` instance. Field defaults mirror what a new user
starts with; a config file only needs to list what differs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, field_validator

from nestegg.financial.models import DebtCategory, SavingsBucket


def _default_expenses() -> dict[str, float]:
    return {
        "rent": 800,
        "utilities": 200,
        "food": 400,
        "transportation": 300,
        "insurance": 150,
        "other": 650,
    }


def _default_debt() -> dict[str, float]:
    return {
        "car": 200,
        "credit_card": 100,
        "student_loan": 0,
        "other": 0,
    }


def _default_savings_goals() -> dict[str, float]:
    return {
        "down_payment": 20000,
        "emergency_fund": 12300,
        "moving_setup": 7000,
        "maintenance": 2000,
    }


def _default_savings_balances() -> dict[str, float]:
    return {
        "down_payment": 1200,
        "emergency_fund": 300,
        "moving_setup": 200,
        "maintenance": 100,
    }


class MortgageDefaults(BaseModel):
    """Scenario parameters pre-filled on the mortgage calculator."""

    down_percent: float = Field(0.10, ge=0, le=1)
    loan_term: int = Field(30, gt=0)
    hoa: float = Field(0, ge=0)
    maintenance_rate: float = Field(0.01, ge=0)
    pmi_rate: float = Field(0.005, ge=0)
    affordability_ratio: float = Field(0.28, ge=0)


class MarketDefaults(BaseModel):
    """Local market figures used when no state data is selected."""

    home_price: float = Field(200000, gt=0)
    tax_rate: float = Field(0.015, ge=0)
    insurance_rate: float = Field(0.005, ge=0)
    price_growth: float = 0.04
    interest_rate: float = Field(0.065, ge=0)


class UserSettings(BaseModel):
    """Per-user defaults for every calculator."""

    model_config = ConfigDict(extra="allow")

    default_income: float = Field(5833, ge=0)
    default_expenses: dict[str, NonNegativeFloat] = Field(default_factory=_default_expenses)
    default_debt: dict[str, NonNegativeFloat] = Field(default_factory=_default_debt)
    savings_goals: dict[str, NonNegativeFloat] = Field(default_factory=_default_savings_goals)
    savings_balances: dict[str, NonNegativeFloat] = Field(default_factory=_default_savings_balances)
    mortgage_defaults: MortgageDefaults = MortgageDefaults()
    market_defaults: MarketDefaults = MarketDefaults()
    selected_state: str = "Ohio"
    credit_score_goal: int = Field(750, ge=300, le=850)

    @field_validator("default_debt")
    @classmethod
    def _known_debt_categories(cls, v: dict[str, Any]) -> dict[str, Any]:
        for key in v:
            DebtCategory.parse(key)
        return v

    @field_validator("savings_goals", "savings_balances")
    @classmethod
    def _known_savings_buckets(cls, v: dict[str, Any]) -> dict[str, Any]:
        for key in v:
            SavingsBucket.parse(key)
        return v
