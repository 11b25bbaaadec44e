"""Mortgage affordability calculator.

Turns a home-purchase scenario into a monthly payment breakdown and checks it
against income:
- Amortized principal & interest
- Escrow (property tax, homeowner's insurance)
- PMI below 20% down
- Maintenance reserve and HOA
- Affordable home price from the 28% front-end guideline
- Debt-to-income ratio

Pure math — no I/O, no state. All rates are fractions (0.065 for 6.5%).
"""

import math
from dataclasses import asdict, dataclass, replace

from nestegg.financial.validation import (
    compound,
    require_fraction,
    require_non_negative,
    require_positive,
    require_term,
)

DEFAULT_PMI_RATE = 0.005
DEFAULT_MAINTENANCE_RATE = 0.01
DEFAULT_AFFORDABILITY_RATIO = 0.28  # Front-end DTI guideline
PMI_FREE_DOWN_PAYMENT = 0.20
STANDARD_TERMS = (15, 20, 25, 30)


@dataclass(frozen=True)
class MortgageInputs:
    """A home-purchase scenario."""

    home_price: float
    down_payment_percent: float  # 0.10 for 10% down
    loan_term_years: int
    annual_interest_rate: float
    property_tax_rate: float = 0.0
    insurance_rate: float = 0.0
    hoa_monthly: float = 0.0
    monthly_gross_income: float = 0.0
    pmi_rate: float = DEFAULT_PMI_RATE
    maintenance_rate: float = DEFAULT_MAINTENANCE_RATE
    affordability_ratio: float = DEFAULT_AFFORDABILITY_RATIO

    def __post_init__(self):
        require_positive("home_price", self.home_price)
        require_fraction("down_payment_percent", self.down_payment_percent)
        require_term("loan_term_years", self.loan_term_years)
        require_fraction("annual_interest_rate", self.annual_interest_rate)
        for name in (
            "property_tax_rate",
            "insurance_rate",
            "hoa_monthly",
            "monthly_gross_income",
            "pmi_rate",
            "maintenance_rate",
            "affordability_ratio",
        ):
            require_non_negative(name, getattr(self, name))


@dataclass(frozen=True)
class EscrowComponents:
    monthly_taxes: float
    monthly_insurance: float


@dataclass(frozen=True)
class MortgageResult:
    """Monthly payment breakdown and affordability check for one scenario."""

    loan_amount: float
    monthly_principal_and_interest: float
    monthly_taxes: float
    monthly_insurance: float
    monthly_pmi: float
    monthly_maintenance: float
    hoa_monthly: float
    total_monthly_payment: float
    affordable_home_price: float
    debt_to_income_ratio: float

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {key: round(value, 2) if math.isfinite(value) else value for key, value in asdict(self).items()}


def compute_loan_amount(home_price: float, down_payment_percent: float) -> float:
    """Amount borrowed after the down payment.

    Raises:
        InvalidInputError: if the price is negative or the percent is outside [0, 1].
    """
    home_price = require_non_negative("home_price", home_price)
    down_payment_percent = require_fraction("down_payment_percent", down_payment_percent)
    return home_price * (1 - down_payment_percent)


def compute_monthly_principal_and_interest(loan_amount: float, annual_interest_rate: float, term_years: int) -> float:
    """Calculate monthly payment for amortizing loan.

    Args:
        loan_amount: Principal borrowed
        annual_interest_rate: Annual interest rate (e.g., 0.065 for 6.5%)
        term_years: Loan term in years

    Returns:
        Monthly principal and interest. A zero rate repays the principal
        in equal installments.
    """
    loan_amount = require_non_negative("loan_amount", loan_amount)
    annual_interest_rate = require_fraction("annual_interest_rate", annual_interest_rate)
    term_years = require_term("term_years", term_years)

    monthly_rate = annual_interest_rate / 12
    num_payments = term_years * 12

    growth = compound("term_years", 1 + monthly_rate, num_payments)
    if growth == 1:
        # Zero or negligible rate: straight-line repayment
        return loan_amount / num_payments
    return loan_amount * monthly_rate / (1 - 1 / growth)


def compute_affordable_loan_amount(monthly_payment: float, annual_interest_rate: float, term_years: int) -> float:
    """Largest principal a fixed monthly payment can amortize (inverse of the payment formula)."""
    monthly_payment = require_non_negative("monthly_payment", monthly_payment)
    annual_interest_rate = require_fraction("annual_interest_rate", annual_interest_rate)
    term_years = require_term("term_years", term_years)

    monthly_rate = annual_interest_rate / 12
    num_payments = term_years * 12

    growth = compound("term_years", 1 + monthly_rate, num_payments)
    if growth == 1:
        return monthly_payment * num_payments
    return monthly_payment * (1 - 1 / growth) / monthly_rate


def compute_escrow_components(home_price: float, tax_rate: float, insurance_rate: float) -> EscrowComponents:
    """Monthly property tax and homeowner's insurance, both priced off the home value."""
    home_price = require_non_negative("home_price", home_price)
    tax_rate = require_non_negative("tax_rate", tax_rate)
    insurance_rate = require_non_negative("insurance_rate", insurance_rate)
    return EscrowComponents(
        monthly_taxes=home_price * tax_rate / 12,
        monthly_insurance=home_price * insurance_rate / 12,
    )


def compute_monthly_pmi(
    loan_amount: float,
    down_payment_percent: float,
    pmi_rate: float = DEFAULT_PMI_RATE,
) -> float:
    """Private mortgage insurance; waived at 20% down or more."""
    loan_amount = require_non_negative("loan_amount", loan_amount)
    down_payment_percent = require_fraction("down_payment_percent", down_payment_percent)
    pmi_rate = require_non_negative("pmi_rate", pmi_rate)

    if down_payment_percent >= PMI_FREE_DOWN_PAYMENT:
        return 0.0
    return loan_amount * pmi_rate / 12


def compute_monthly_maintenance(home_price: float, maintenance_rate: float = DEFAULT_MAINTENANCE_RATE) -> float:
    """Upkeep reserve, 1% of the home value per year by default."""
    home_price = require_non_negative("home_price", home_price)
    maintenance_rate = require_non_negative("maintenance_rate", maintenance_rate)
    return home_price * maintenance_rate / 12


def compute_total_monthly_payment(
    monthly_principal_and_interest: float,
    monthly_taxes: float,
    monthly_insurance: float,
    monthly_pmi: float,
    monthly_maintenance: float,
    hoa_monthly: float = 0.0,
) -> float:
    """Sum of every monthly housing cost."""
    components = {
        "monthly_principal_and_interest": monthly_principal_and_interest,
        "monthly_taxes": monthly_taxes,
        "monthly_insurance": monthly_insurance,
        "monthly_pmi": monthly_pmi,
        "monthly_maintenance": monthly_maintenance,
        "hoa_monthly": hoa_monthly,
    }
    return sum(require_non_negative(name, value) for name, value in components.items())


def compute_affordable_home_price(
    monthly_gross_income: float,
    affordability_ratio: float = DEFAULT_AFFORDABILITY_RATIO,
    annual_interest_rate: float = 0.065,
    term_years: int = 30,
    down_payment_percent: float = 0.0,
) -> float:
    """Home price whose loan payment fits within ``income * affordability_ratio``.

    Finds the loan the budgeted payment can amortize, then grosses it up by the
    financed share of the price. With 100% down any price is affordable, so
    ``math.inf`` is returned.
    """
    monthly_gross_income = require_non_negative("monthly_gross_income", monthly_gross_income)
    affordability_ratio = require_non_negative("affordability_ratio", affordability_ratio)
    down_payment_percent = require_fraction("down_payment_percent", down_payment_percent)

    max_payment = monthly_gross_income * affordability_ratio
    loan = compute_affordable_loan_amount(max_payment, annual_interest_rate, term_years)

    financed_share = 1 - down_payment_percent
    if financed_share == 0:
        return math.inf
    return loan / financed_share


def compute_debt_to_income_ratio(total_monthly_payment: float, monthly_gross_income: float) -> float:
    """Housing payment as a share of gross income.

    Zero income returns 0 rather than raising, so a user who has not entered
    income yet still gets a result.
    """
    total_monthly_payment = require_non_negative("total_monthly_payment", total_monthly_payment)
    monthly_gross_income = require_non_negative("monthly_gross_income", monthly_gross_income)
    if monthly_gross_income == 0:
        return 0.0
    return total_monthly_payment / monthly_gross_income


def calculate_mortgage(inputs: MortgageInputs) -> MortgageResult:
    """Full payment breakdown for a scenario."""
    loan_amount = compute_loan_amount(inputs.home_price, inputs.down_payment_percent)
    principal_and_interest = compute_monthly_principal_and_interest(
        loan_amount, inputs.annual_interest_rate, inputs.loan_term_years
    )
    escrow = compute_escrow_components(inputs.home_price, inputs.property_tax_rate, inputs.insurance_rate)
    pmi = compute_monthly_pmi(loan_amount, inputs.down_payment_percent, inputs.pmi_rate)
    maintenance = compute_monthly_maintenance(inputs.home_price, inputs.maintenance_rate)

    total = compute_total_monthly_payment(
        principal_and_interest,
        escrow.monthly_taxes,
        escrow.monthly_insurance,
        pmi,
        maintenance,
        inputs.hoa_monthly,
    )

    return MortgageResult(
        loan_amount=loan_amount,
        monthly_principal_and_interest=principal_and_interest,
        monthly_taxes=escrow.monthly_taxes,
        monthly_insurance=escrow.monthly_insurance,
        monthly_pmi=pmi,
        monthly_maintenance=maintenance,
        hoa_monthly=inputs.hoa_monthly,
        total_monthly_payment=total,
        affordable_home_price=compute_affordable_home_price(
            inputs.monthly_gross_income,
            inputs.affordability_ratio,
            inputs.annual_interest_rate,
            inputs.loan_term_years,
            inputs.down_payment_percent,
        ),
        debt_to_income_ratio=compute_debt_to_income_ratio(total, inputs.monthly_gross_income),
    )


def compare_terms(inputs: MortgageInputs, terms: tuple[int, ...] = STANDARD_TERMS) -> dict[int, MortgageResult]:
    """Run the same scenario across several loan terms, keyed by term in years."""
    return {term: calculate_mortgage(replace(inputs, loan_term_years=term)) for term in terms}
