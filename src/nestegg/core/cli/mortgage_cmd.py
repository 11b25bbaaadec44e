"""nestegg mortgage — monthly payment breakdown and affordability check."""

from __future__ import annotations

import math

import click

from nestegg.core.cli.common import money, percent, reports_errors, user_settings


@click.command()
@click.option("--home-price", type=float, help="Purchase price. Defaults to the local market price.")
@click.option("--down", "down_percent", type=float, help="Down payment as a fraction (0.10 = 10%).")
@click.option("--term", type=int, help="Loan term in years.")
@click.option("--rate", type=float, help="Annual interest rate as a fraction (0.065 = 6.5%).")
@click.option("--tax-rate", type=float, help="Annual property tax rate as a fraction.")
@click.option("--insurance-rate", type=float, help="Annual insurance rate as a fraction.")
@click.option("--hoa", type=float, help="Monthly HOA dues.")
@click.option("--income", type=float, help="Monthly gross income.")
@click.option("--compare", is_flag=True, help="Compare 15, 20, 25, and 30 year terms.")
@click.pass_context
@reports_errors
def mortgage(
    ctx: click.Context,
    home_price: float | None,
    down_percent: float | None,
    term: int | None,
    rate: float | None,
    tax_rate: float | None,
    insurance_rate: float | None,
    hoa: float | None,
    income: float | None,
    compare: bool,
) -> None:
    """Break a home purchase down into monthly costs."""
    from nestegg.financial.calculators.mortgage import MortgageInputs, calculate_mortgage, compare_terms

    settings = user_settings(ctx)
    defaults = settings.mortgage_defaults
    market = settings.market_defaults

    inputs = MortgageInputs(
        home_price=home_price if home_price is not None else market.home_price,
        down_payment_percent=down_percent if down_percent is not None else defaults.down_percent,
        loan_term_years=term if term is not None else defaults.loan_term,
        annual_interest_rate=rate if rate is not None else market.interest_rate,
        property_tax_rate=tax_rate if tax_rate is not None else market.tax_rate,
        insurance_rate=insurance_rate if insurance_rate is not None else market.insurance_rate,
        hoa_monthly=hoa if hoa is not None else defaults.hoa,
        monthly_gross_income=income if income is not None else settings.default_income,
        pmi_rate=defaults.pmi_rate,
        maintenance_rate=defaults.maintenance_rate,
        affordability_ratio=defaults.affordability_ratio,
    )

    if compare:
        click.echo(f"{'Term':<8} {'Payment':>14} {'DTI':>8}")
        for years, scenario in compare_terms(inputs).items():
            click.echo(
                f"{years:<8} {money(scenario.total_monthly_payment):>14} {percent(scenario.debt_to_income_ratio):>8}"
            )
        return

    result = calculate_mortgage(inputs)
    rows = [
        ("Loan amount", money(result.loan_amount)),
        ("Principal & interest", money(result.monthly_principal_and_interest)),
        ("Property taxes", money(result.monthly_taxes)),
        ("Insurance", money(result.monthly_insurance)),
        ("PMI", money(result.monthly_pmi)),
        ("Maintenance", money(result.monthly_maintenance)),
        ("HOA", money(result.hoa_monthly)),
        ("Total monthly payment", money(result.total_monthly_payment)),
        (
            "Affordable price",
            "no limit" if math.isinf(result.affordable_home_price) else money(result.affordable_home_price),
        ),
        ("Debt-to-income", percent(result.debt_to_income_ratio)),
    ]
    for label, value in rows:
        click.echo(f"{label:<24} {value:>14}")

    if inputs.home_price > result.affordable_home_price:
        click.echo("\nThis price is above what your income supports.")
