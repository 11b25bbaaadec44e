"""nestegg budget — monthly totals and savings rate from your defaults."""

from __future__ import annotations

import click

from nestegg.core.cli.common import money, percent, reports_errors, user_settings


@click.command()
@click.option("--income", type=float, help="Monthly income. Defaults to your configured income.")
@click.option(
    "--expense",
    "expenses",
    multiple=True,
    metavar="CATEGORY=AMOUNT",
    help="Override or add an expense category (repeatable).",
)
@click.pass_context
@reports_errors
def budget(ctx: click.Context, income: float | None, expenses: tuple[str, ...]) -> None:
    """Show disposable income and savings rate."""
    from nestegg.financial.calculators.budget import BudgetInputs, summarize_budget

    settings = user_settings(ctx)
    expense_amounts = dict(settings.default_expenses)
    for item in expenses:
        category, sep, amount = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected CATEGORY=AMOUNT, got {item!r}", param_hint="--expense")
        try:
            expense_amounts[category.strip()] = float(amount)
        except ValueError:
            raise click.BadParameter(f"{amount!r} is not a number", param_hint="--expense") from None

    result = summarize_budget(
        BudgetInputs(
            monthly_income=income if income is not None else settings.default_income,
            expenses=expense_amounts,
            debts=settings.default_debt,
        )
    )

    click.echo(f"{'Income':<20} {money(result.monthly_income):>12}")
    click.echo(f"{'Expenses':<20} {money(result.total_expenses):>12}")
    click.echo(f"{'Debt payments':<20} {money(result.total_debt):>12}")
    click.echo(f"{'Disposable':<20} {money(result.disposable_income):>12}")
    click.echo(f"{'Savings rate':<20} {percent(result.savings_rate):>12}")
    if result.is_overspending:
        click.echo("\nYou are spending more than you earn this month.")
