"""nestegg savings — progress toward your savings goals."""

from __future__ import annotations

import click

from nestegg.core.cli.common import money, percent, reports_errors, user_settings


@click.command()
@click.option("--monthly", "monthly_contribution", type=float, default=0.0, help="Planned monthly contribution.")
@click.pass_context
@reports_errors
def savings(ctx: click.Context, monthly_contribution: float) -> None:
    """Show savings per bucket, percent to goal, and months remaining."""
    from nestegg.financial.calculators.savings import SavingsSnapshot, summarize_savings

    settings = user_settings(ctx)
    snapshot = SavingsSnapshot(
        balances=settings.savings_balances,
        goals=settings.savings_goals,
        monthly_contribution=monthly_contribution,
    )
    progress = summarize_savings(snapshot)

    for bucket, goal in snapshot.goals.items():
        balance = snapshot.balances.get(bucket, 0.0)
        click.echo(f"{bucket.label:<16} {money(balance):>12} / {money(goal):>12}  {percent(progress.by_bucket[bucket])}")

    click.echo(f"\n{'Total':<16} {money(progress.total_savings):>12} / {money(progress.total_goal):>12}")
    click.echo(f"Percent to goal: {percent(progress.percent_to_goal)}")
    if progress.estimated_months_remaining is None:
        click.echo("Months remaining: unknown (set --monthly to estimate)")
    else:
        click.echo(f"Months remaining: {progress.estimated_months_remaining}")
