"""Budget aggregator.

Rolls monthly income, expenses, and debt payments up into disposable income
and a savings rate. Works either from pre-aggregated category amounts
(``BudgetInputs``) or from a dated list of ``Transaction`` records.
"""

import re
from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date

from nestegg.core.exceptions import InvalidInputError
from nestegg.financial.models import DebtCategory, Transaction, TransactionType, parse_debt_amounts
from nestegg.financial.validation import require_amounts, require_fraction, require_non_negative

# Share of disposable income earmarked for savings
DEFAULT_SAVINGS_FRACTION = 0.30

_PERIOD_RE = re.compile(r"\d{4}-\d{2}(-\d{2})?")


@dataclass(frozen=True)
class BudgetInputs:
    """One month of income and outgoings.

    Attributes:
        monthly_income: Take-home income for the month.
        expenses: Expense category -> amount. Categories are user defined.
        debts: Debt category -> amount. Keys are parsed into DebtCategory.
    """

    monthly_income: float
    expenses: Mapping[str, float] = field(default_factory=dict)
    debts: Mapping[DebtCategory, float] = field(default_factory=dict)

    def __post_init__(self):
        require_non_negative("monthly_income", self.monthly_income)
        object.__setattr__(self, "expenses", require_amounts("expenses", self.expenses))
        object.__setattr__(self, "debts", require_amounts("debts", parse_debt_amounts(self.debts)))


@dataclass(frozen=True)
class BudgetResult:
    monthly_income: float
    total_expenses: float
    total_debt: float
    disposable_income: float
    savings_rate: float

    @property
    def is_overspending(self) -> bool:
        return self.disposable_income < 0


def sum_categories(amounts: Mapping) -> float:
    """Total of a category->amount mapping; an empty mapping totals 0."""
    return sum(require_amounts("amounts", amounts).values(), 0.0)


def compute_disposable_income(income: float, total_expenses: float, total_debt: float) -> float:
    """Income left after expenses and debt. Negative means overspending."""
    income = require_non_negative("income", income)
    total_expenses = require_non_negative("total_expenses", total_expenses)
    total_debt = require_non_negative("total_debt", total_debt)
    return income - total_expenses - total_debt


def compute_savings_rate(
    disposable_income: float,
    income: float,
    target_savings_fraction: float = DEFAULT_SAVINGS_FRACTION,
) -> float:
    """Savings as a share of income, assuming ``target_savings_fraction`` of
    disposable income is saved. Returns 0 when there is no income."""
    income = require_non_negative("income", income)
    target_savings_fraction = require_fraction("target_savings_fraction", target_savings_fraction)
    if income == 0:
        return 0.0
    return disposable_income * target_savings_fraction / income


def summarize_budget(
    inputs: BudgetInputs,
    target_savings_fraction: float = DEFAULT_SAVINGS_FRACTION,
) -> BudgetResult:
    total_expenses = sum_categories(inputs.expenses)
    total_debt = sum_categories(inputs.debts)
    disposable = compute_disposable_income(inputs.monthly_income, total_expenses, total_debt)
    return BudgetResult(
        monthly_income=inputs.monthly_income,
        total_expenses=total_expenses,
        total_debt=total_debt,
        disposable_income=disposable,
        savings_rate=compute_savings_rate(disposable, inputs.monthly_income, target_savings_fraction),
    )


def _period_key(period) -> str:
    """Accept a date/datetime, "YYYY-MM" or "YYYY-MM-DD" and return "YYYY-MM"."""
    if isinstance(period, date):
        return f"{period.year:04d}-{period.month:02d}"
    if isinstance(period, str) and _PERIOD_RE.fullmatch(period):
        try:
            date.fromisoformat(period if len(period) > 7 else f"{period}-01")
        except ValueError:
            pass
        else:
            return period[:7]
    raise InvalidInputError("period", period, "must be a date or a YYYY-MM string")


def aggregate_by_category_and_type(
    transactions: Iterable[Transaction],
    period,
    transaction_type: TransactionType | str | None = None,
) -> dict[TransactionType, dict[str, float]]:
    """Group one month's transactions into per-type category totals.

    Args:
        transactions: Dated transactions in any order.
        period: Month to keep, as a date or "YYYY-MM". Matching is exact on
            year and month.
        transaction_type: Restrict to a single type. When omitted every type
            present in the month gets an entry.

    Returns:
        ``{TransactionType: {category: total}}``
    """
    month = _period_key(period)
    wanted = TransactionType.parse(transaction_type) if transaction_type is not None else None

    grouped: dict[TransactionType, dict[str, float]] = defaultdict(lambda: defaultdict(float))
    for txn in transactions:
        if txn.period != month:
            continue
        if wanted is not None and txn.transaction_type is not wanted:
            continue
        grouped[txn.transaction_type][txn.category] += txn.amount

    result = {txn_type: dict(categories) for txn_type, categories in grouped.items()}
    if wanted is not None:
        result.setdefault(wanted, {})
    return result


def summarize_transactions(
    transactions: Iterable[Transaction],
    period,
    target_savings_fraction: float = DEFAULT_SAVINGS_FRACTION,
) -> BudgetResult:
    """Monthly budget figures computed from raw transactions."""
    grouped = aggregate_by_category_and_type(transactions, period)

    def total(txn_type: TransactionType) -> float:
        return sum(grouped.get(txn_type, {}).values(), 0.0)

    income = total(TransactionType.INCOME)
    expenses = total(TransactionType.EXPENSE)
    debt = total(TransactionType.DEBT_PAYMENT)
    disposable = compute_disposable_income(income, expenses, debt)
    return BudgetResult(
        monthly_income=income,
        total_expenses=expenses,
        total_debt=debt,
        disposable_income=disposable,
        savings_rate=compute_savings_rate(disposable, income, target_savings_fraction),
    )


def totals_by_month(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType | str,
) -> dict[str, float]:
    """Per-month totals for one transaction type, oldest month first."""
    wanted = TransactionType.parse(transaction_type)
    totals: dict[str, float] = defaultdict(float)
    for txn in transactions:
        if txn.transaction_type is wanted:
            totals[txn.period] += txn.amount
    return dict(sorted(totals.items()))


def chart_series(result: BudgetResult) -> dict[str, float]:
    """Bar values for the budget chart. Available funds never plot below zero."""
    return {
        "Income": result.monthly_income,
        "Expenses": result.total_expenses,
        "Debt": result.total_debt,
        "Available": max(0.0, result.disposable_income),
    }
