"""Savings goal tracker.

Turns bucketed savings balances and goals (down payment, emergency fund,
moving/setup, maintenance) into progress metrics, and applies contributions
and withdrawals to the buckets.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from nestegg.core.exceptions import InvalidInputError
from nestegg.financial.models import SavingsBucket, Transaction, TransactionType, parse_bucket_amounts
from nestegg.financial.validation import require_amounts, require_choice, require_non_negative, require_number

WEEKS_PER_MONTH = 4.33


class ContributionMode(Enum):
    ADD = "add"
    SUBTRACT = "subtract"


class ContributionFrequency(Enum):
    """How often a contribution recurs; scales it to a monthly amount."""

    ONE_TIME = "one_time"
    MONTHLY = "monthly"
    WEEKLY = "weekly"

    @property
    def monthly_multiplier(self) -> float:
        return WEEKS_PER_MONTH if self is ContributionFrequency.WEEKLY else 1.0


@dataclass(frozen=True)
class SavingsSnapshot:
    """Balances and goals per bucket at a point in time."""

    balances: Mapping[SavingsBucket, float]
    goals: Mapping[SavingsBucket, float]
    monthly_contribution: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "balances", require_amounts("balances", parse_bucket_amounts(self.balances)))
        object.__setattr__(self, "goals", require_amounts("goals", parse_bucket_amounts(self.goals)))
        require_non_negative("monthly_contribution", self.monthly_contribution)


@dataclass(frozen=True)
class SavingsProgress:
    total_savings: float
    total_goal: float
    percent_to_goal: float
    # None when no contribution is planned: the date cannot be estimated
    estimated_months_remaining: int | None
    by_bucket: dict[SavingsBucket, float] = field(default_factory=dict)


def compute_total_savings(balances: Mapping) -> float:
    """Sum of all bucket balances."""
    return sum(require_amounts("balances", balances).values(), 0.0)


def compute_total_goal(goals: Mapping) -> float:
    """Sum of all bucket goals."""
    return sum(require_amounts("goals", goals).values(), 0.0)


def compute_percent_to_goal(total_savings: float, total_goal: float) -> float:
    """Progress as a fraction. Not capped: 1.2 means the goal was beaten by 20%.

    Returns 0 when no goal is set.
    """
    total_savings = require_non_negative("total_savings", total_savings)
    total_goal = require_non_negative("total_goal", total_goal)
    if total_goal == 0:
        return 0.0
    return total_savings / total_goal


def display_percent(percent_to_goal: float) -> float:
    """Progress-bar value: percent_to_goal as 0..100."""
    return min(max(percent_to_goal * 100, 0.0), 100.0)


def apply_contribution(
    balances: Mapping,
    contributions: Mapping,
    mode: ContributionMode | str = ContributionMode.ADD,
    frequency: ContributionFrequency | str = ContributionFrequency.ONE_TIME,
) -> dict[SavingsBucket, float]:
    """Add to or take from each bucket.

    Subtraction removes the magnitude of each entry, so ``-150`` and ``150``
    both withdraw 150. Recurring additions are scaled to a month by
    ``frequency``; withdrawals never are. Every bucket is floored at 0, so
    overdrawing a bucket empties it.

    Returns:
        New bucket->balance mapping; the input is left untouched.
    """
    mode = require_choice("mode", ContributionMode, mode)
    frequency = require_choice("frequency", ContributionFrequency, frequency)
    new_balances = parse_bucket_amounts(balances)
    require_amounts("balances", new_balances)

    for bucket, delta in parse_bucket_amounts(contributions).items():
        delta = require_number(f"contributions[{bucket.value}]", delta)
        if mode is ContributionMode.SUBTRACT:
            adjusted = -abs(delta)
        else:
            adjusted = delta * frequency.monthly_multiplier
        new_balances[bucket] = max(0.0, new_balances.get(bucket, 0.0) + adjusted)

    return new_balances


def apply_transactions(balances: Mapping, transactions: Iterable[Transaction]) -> dict[SavingsBucket, float]:
    """Replay savings contributions and withdrawals onto bucket balances.

    Transactions whose category is not a savings bucket (e.g. "General") and
    non-savings transaction types are skipped. Buckets never go below 0.
    """
    new_balances = parse_bucket_amounts(balances)
    require_amounts("balances", new_balances)

    for txn in transactions:
        if txn.transaction_type is TransactionType.SAVINGS_CONTRIBUTION:
            sign = 1
        elif txn.transaction_type is TransactionType.SAVINGS_WITHDRAWAL:
            sign = -1
        else:
            continue
        try:
            bucket = SavingsBucket.parse(txn.category)
        except InvalidInputError:
            continue
        new_balances[bucket] = max(0.0, new_balances.get(bucket, 0.0) + sign * txn.amount)

    return new_balances


def estimate_months_remaining(
    total_goal: float,
    total_savings: float,
    monthly_contribution_rate: float,
) -> int | None:
    """Whole months until the goal is reached at the given monthly rate.

    Returns:
        0 if the goal is already met, ``None`` when the rate is zero (no
        estimate is possible), otherwise the rounded-up month count.
    """
    total_goal = require_non_negative("total_goal", total_goal)
    total_savings = require_non_negative("total_savings", total_savings)
    monthly_contribution_rate = require_non_negative("monthly_contribution_rate", monthly_contribution_rate)

    remaining = total_goal - total_savings
    if remaining <= 0:
        return 0
    if monthly_contribution_rate == 0:
        return None
    return math.ceil(remaining / monthly_contribution_rate)


def summarize_savings(snapshot: SavingsSnapshot) -> SavingsProgress:
    total_savings = compute_total_savings(snapshot.balances)
    total_goal = compute_total_goal(snapshot.goals)
    return SavingsProgress(
        total_savings=total_savings,
        total_goal=total_goal,
        percent_to_goal=compute_percent_to_goal(total_savings, total_goal),
        estimated_months_remaining=estimate_months_remaining(
            total_goal, total_savings, snapshot.monthly_contribution
        ),
        by_bucket={
            bucket: compute_percent_to_goal(snapshot.balances.get(bucket, 0.0), goal)
            for bucket, goal in snapshot.goals.items()
        },
    )
