"""nestegg credit — classify a credit score against your goal."""

from __future__ import annotations

import click

from nestegg.core.cli.common import reports_errors, user_settings


@click.command()
@click.argument("score", type=int)
@click.pass_context
@reports_errors
def credit(ctx: click.Context, score: int) -> None:
    """Show the band for SCORE and the points left to your goal."""
    from nestegg.financial.calculators.credit import classify_score, progress_to_goal

    settings = user_settings(ctx)
    band = classify_score(score)
    remaining = progress_to_goal(score, settings.credit_score_goal)

    click.echo(f"{score}: {band.value}")
    if remaining:
        click.echo(f"{remaining} points to your goal of {settings.credit_score_goal}")
    else:
        click.echo(f"Goal of {settings.credit_score_goal} reached")
