"""Core financial data models.

Enumerated keys for the closed category sets (savings buckets, debt types,
transaction types) and the dated Transaction record. User-defined expense
categories stay plain strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

from nestegg.core.exceptions import InvalidInputError
from nestegg.financial.validation import require_number, require_positive


def _normalize_key(raw: str) -> str:
    # "Down Payment" -> "down_payment", "Moving/Setup" -> "moving_setup"
    return re.sub(r"[\s/\-]+", "_", raw.strip().lower())


class _KeyEnum(str, Enum):
    """String enum whose members can be parsed from values or display labels.

    Members compare and hash equal to their values, so mappings keyed by
    enum members also match plain string keys.
    """

    @classmethod
    def parse(cls, raw):
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidInputError(cls.__name__, raw, "must be a string key")
        try:
            return cls(_normalize_key(raw))
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise InvalidInputError(cls.__name__, raw, f"unknown key (expected one of: {allowed})") from None

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class SavingsBucket(_KeyEnum):
    """Named sub-goals within total savings."""

    DOWN_PAYMENT = "down_payment"
    EMERGENCY_FUND = "emergency_fund"
    MOVING_SETUP = "moving_setup"
    MAINTENANCE = "maintenance"


class DebtCategory(_KeyEnum):
    """Recurring monthly debt obligations tracked by the budget."""

    CAR = "car"
    CREDIT_CARD = "credit_card"
    STUDENT_LOAN = "student_loan"
    OTHER = "other"


class TransactionType(_KeyEnum):
    INCOME = "income"
    EXPENSE = "expense"
    DEBT_PAYMENT = "debt_payment"
    SAVINGS_CONTRIBUTION = "savings_contribution"
    SAVINGS_WITHDRAWAL = "savings_withdrawal"


@dataclass(frozen=True)
class Transaction:
    """A single dated money movement.

    Attributes:
        transaction_type: income, expense, debt payment, or savings movement.
        category: Free-form label, e.g. "Salary", "Rent", "Down Payment".
        amount: Always positive; the type carries the direction.
        date: Calendar date of the transaction. ISO strings are accepted.
        description: Optional note.
    """

    transaction_type: TransactionType
    category: str
    amount: float
    date: date
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "transaction_type", TransactionType.parse(self.transaction_type))
        if isinstance(self.date, str):
            try:
                object.__setattr__(self, "date", date.fromisoformat(self.date[:10]))
            except ValueError:
                raise InvalidInputError("date", self.date, "must be an ISO date (YYYY-MM-DD)") from None
        if not isinstance(self.date, date):
            raise InvalidInputError("date", self.date, "must be a date")
        if not self.category:
            raise InvalidInputError("category", self.category, "cannot be empty")
        require_positive("amount", self.amount)

    @property
    def period(self) -> str:
        """Year-month key, e.g. "2025-09"."""
        return f"{self.date.year:04d}-{self.date.month:02d}"


def parse_bucket_amounts(amounts) -> dict[SavingsBucket, float]:
    """Normalize a bucket->amount mapping to SavingsBucket keys.

    Duplicate keys that normalize to the same bucket are summed.
    """
    result: dict[SavingsBucket, float] = {}
    for key, value in amounts.items():
        bucket = SavingsBucket.parse(key)
        result[bucket] = result.get(bucket, 0.0) + require_number(bucket.value, value)
    return result


def parse_debt_amounts(amounts) -> dict[DebtCategory, float]:
    """Normalize a debt-category->amount mapping to DebtCategory keys."""
    result: dict[DebtCategory, float] = {}
    for key, value in amounts.items():
        category = DebtCategory.parse(key)
        result[category] = result.get(category, 0.0) + require_number(category.value, value)
    return result
