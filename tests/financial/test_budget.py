"""Tests for nestegg.financial.calculators.budget."""

from datetime import date, datetime

import pytest

from nestegg.core.exceptions import InvalidInputError
from nestegg.financial.calculators.budget import (
    BudgetInputs,
    aggregate_by_category_and_type,
    chart_series,
    compute_disposable_income,
    compute_savings_rate,
    sum_categories,
    summarize_budget,
    summarize_transactions,
    totals_by_month,
)
from nestegg.financial.models import DebtCategory, Transaction, TransactionType


class TestSumCategories:
    def test_sums_values(self):
        assert sum_categories({"rent": 800, "utilities": 200, "food": 400}) == 1_400

    def test_empty(self):
        assert sum_categories({}) == 0

    def test_negative_amount_raises(self):
        with pytest.raises(InvalidInputError, match=r"amounts\[food\]"):
            sum_categories({"rent": 800, "food": -5})


class TestDisposableIncome:
    def test_positive(self):
        assert compute_disposable_income(5_833, 2_500, 300) == 3_033

    def test_overspending_is_negative(self):
        assert compute_disposable_income(2_000, 2_500, 300) == -800


class TestSavingsRate:
    def test_default_fraction(self):
        # 30% of $3,000 disposable on $6,000 income
        assert compute_savings_rate(3_000, 6_000) == pytest.approx(0.15)

    def test_custom_fraction(self):
        assert compute_savings_rate(3_000, 6_000, target_savings_fraction=0.5) == pytest.approx(0.25)

    def test_zero_income(self):
        assert compute_savings_rate(0, 0) == 0
        assert compute_savings_rate(-500, 0) == 0

    def test_negative_disposable_gives_negative_rate(self):
        assert compute_savings_rate(-1_000, 2_000) == pytest.approx(-0.15)


class TestSummarizeBudget:
    def test_settings_defaults(self):
        inputs = BudgetInputs(
            monthly_income=5_833,
            expenses={"rent": 800, "utilities": 200, "food": 400, "transportation": 300, "insurance": 150, "other": 650},
            debts={"car": 200, "credit_card": 100, "student_loan": 0, "other": 0},
        )
        result = summarize_budget(inputs)

        assert result.total_expenses == 2_500
        assert result.total_debt == 300
        assert result.disposable_income == 3_033
        assert result.savings_rate == pytest.approx(3_033 * 0.3 / 5_833)
        assert not result.is_overspending

    def test_debt_keys_parsed(self):
        inputs = BudgetInputs(monthly_income=1_000, debts={"Credit Card": 100, "Student Loan": 50})
        assert inputs.debts == {DebtCategory.CREDIT_CARD: 100, DebtCategory.STUDENT_LOAN: 50}

    def test_unknown_debt_category_raises(self):
        with pytest.raises(InvalidInputError, match="DebtCategory"):
            BudgetInputs(monthly_income=1_000, debts={"boat": 100})

    def test_negative_income_raises(self):
        with pytest.raises(InvalidInputError, match="monthly_income"):
            BudgetInputs(monthly_income=-1)


class TestAggregateByCategoryAndType:
    def test_single_type(self, september_transactions):
        result = aggregate_by_category_and_type(september_transactions, "2025-09", TransactionType.EXPENSE)
        assert result == {TransactionType.EXPENSE: {"Rent": 1_200, "Food": 450}}

    def test_all_types(self, september_transactions):
        result = aggregate_by_category_and_type(september_transactions, date(2025, 9, 17))
        assert result[TransactionType.INCOME] == {"Salary": 5_000, "Freelance": 800}
        assert result[TransactionType.DEBT_PAYMENT] == {"Car": 250}
        assert result[TransactionType.SAVINGS_CONTRIBUTION] == {"Down Payment": 500}
        assert TransactionType.SAVINGS_WITHDRAWAL not in result

    def test_type_as_string(self, september_transactions):
        result = aggregate_by_category_and_type(september_transactions, "2025-09", "debt_payment")
        assert result == {TransactionType.DEBT_PAYMENT: {"Car": 250}}

    def test_exact_month_match(self, september_transactions):
        result = aggregate_by_category_and_type(september_transactions, "2025-08", "income")
        assert result == {TransactionType.INCOME: {"Salary": 5_000}}

    def test_empty_month(self, september_transactions):
        assert aggregate_by_category_and_type(september_transactions, "2024-01", "income") == {
            TransactionType.INCOME: {}
        }
        assert aggregate_by_category_and_type(september_transactions, "2024-01") == {}

    def test_datetime_period(self, september_transactions):
        result = aggregate_by_category_and_type(september_transactions, datetime(2025, 10, 5, 12, 0), "expense")
        assert result == {TransactionType.EXPENSE: {"Rent": 1_200}}

    def test_full_date_string_period(self, september_transactions):
        result = aggregate_by_category_and_type(september_transactions, "2025-10-05", "expense")
        assert result == {TransactionType.EXPENSE: {"Rent": 1_200}}

    @pytest.mark.parametrize(
        "period", ["2025/09", "Sept", "2025-13", 202509, "2025-09xyz", "2025-09-99", "2025-09-01T00"]
    )
    def test_bad_period_raises(self, september_transactions, period):
        with pytest.raises(InvalidInputError, match="period"):
            aggregate_by_category_and_type(september_transactions, period)


class TestSummarizeTransactions:
    def test_month(self, september_transactions):
        result = summarize_transactions(september_transactions, "2025-09")
        assert result.monthly_income == 5_800
        assert result.total_expenses == 1_650
        assert result.total_debt == 250
        assert result.disposable_income == 3_900
        assert result.savings_rate == pytest.approx(3_900 * 0.3 / 5_800)

    def test_month_without_income(self, september_transactions):
        result = summarize_transactions(september_transactions, "2025-10")
        assert result.disposable_income == -1_200
        assert result.savings_rate == 0
        assert result.is_overspending


class TestTotalsByMonth:
    def test_rollup_sorted(self, september_transactions):
        totals = totals_by_month(reversed(september_transactions), "income")
        assert totals == {"2025-08": 5_000, "2025-09": 5_800}
        assert list(totals) == ["2025-08", "2025-09"]


class TestChartSeries:
    def test_available_clamped(self):
        result = summarize_budget(BudgetInputs(monthly_income=1_000, expenses={"rent": 1_500}))
        series = chart_series(result)
        assert series["Available"] == 0
        assert series["Expenses"] == 1_500


class TestTransaction:
    def test_iso_string_date(self):
        txn = Transaction("expense", "Rent", 800, "2025-09-01")
        assert txn.date == date(2025, 9, 1)
        assert txn.period == "2025-09"

    def test_non_positive_amount_raises(self):
        with pytest.raises(InvalidInputError, match="amount"):
            Transaction("expense", "Rent", 0, date(2025, 9, 1))

    @pytest.mark.parametrize("amount", [float("inf"), float("nan"), True, "800"])
    def test_non_finite_amount_raises(self, amount):
        with pytest.raises(InvalidInputError, match="amount"):
            Transaction("expense", "Rent", amount, date(2025, 9, 1))

    def test_unknown_type_raises(self):
        with pytest.raises(InvalidInputError, match="TransactionType"):
            Transaction("refund", "Rent", 10, date(2025, 9, 1))
