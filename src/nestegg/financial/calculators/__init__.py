"""Financial calculators — mortgage, budget, savings, credit, market, milestones."""

from .budget import (
    BudgetInputs,
    BudgetResult,
    aggregate_by_category_and_type,
    chart_series,
    compute_disposable_income,
    compute_savings_rate,
    sum_categories,
    summarize_budget,
    summarize_transactions,
    totals_by_month,
)
from .credit import (
    CreditBand,
    CreditScoreEntry,
    classify_score,
    latest_score,
    progress_to_goal,
    score_changes,
    validate_score,
)
from .market import AlertLevel, MarketAlert, MarketConditions, market_alerts, project_home_price
from .milestones import Milestone, MilestoneStatus, alerting, completion_ratio, overdue, toggle_status
from .mortgage import (
    EscrowComponents,
    MortgageInputs,
    MortgageResult,
    calculate_mortgage,
    compare_terms,
    compute_affordable_home_price,
    compute_affordable_loan_amount,
    compute_debt_to_income_ratio,
    compute_escrow_components,
    compute_loan_amount,
    compute_monthly_maintenance,
    compute_monthly_pmi,
    compute_monthly_principal_and_interest,
    compute_total_monthly_payment,
)
from .savings import (
    ContributionFrequency,
    ContributionMode,
    SavingsProgress,
    SavingsSnapshot,
    apply_contribution,
    apply_transactions,
    compute_percent_to_goal,
    compute_total_goal,
    compute_total_savings,
    display_percent,
    estimate_months_remaining,
    summarize_savings,
)

__all__ = [
    "AlertLevel",
    "BudgetInputs",
    "BudgetResult",
    "ContributionFrequency",
    "ContributionMode",
    "CreditBand",
    "CreditScoreEntry",
    "EscrowComponents",
    "MarketAlert",
    "MarketConditions",
    "Milestone",
    "MilestoneStatus",
    "MortgageInputs",
    "MortgageResult",
    "SavingsProgress",
    "SavingsSnapshot",
    "aggregate_by_category_and_type",
    "alerting",
    "apply_contribution",
    "apply_transactions",
    "calculate_mortgage",
    "chart_series",
    "classify_score",
    "compare_terms",
    "completion_ratio",
    "compute_affordable_home_price",
    "compute_affordable_loan_amount",
    "compute_debt_to_income_ratio",
    "compute_disposable_income",
    "compute_escrow_components",
    "compute_loan_amount",
    "compute_monthly_maintenance",
    "compute_monthly_pmi",
    "compute_monthly_principal_and_interest",
    "compute_percent_to_goal",
    "compute_savings_rate",
    "compute_total_goal",
    "compute_total_monthly_payment",
    "compute_total_savings",
    "display_percent",
    "estimate_months_remaining",
    "latest_score",
    "market_alerts",
    "overdue",
    "progress_to_goal",
    "project_home_price",
    "score_changes",
    "sum_categories",
    "summarize_budget",
    "summarize_savings",
    "summarize_transactions",
    "toggle_status",
    "totals_by_month",
    "validate_score",
]
