"""nestegg CLI — entry point for the mortgage, budget, savings, and credit commands."""

import click

from nestegg import __version__

from .common import DEFAULT_CONFIG_PATH


@click.group()
@click.version_option(version=__version__, package_name="nestegg")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="YAML or JSON file with your defaults.",
)
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING, or ERROR.")
@click.pass_context
def main(ctx: click.Context, config_path: str, log_level: str | None) -> None:
    """nestegg — track your path to buying a home."""
    from nestegg.core.cli.common import load_config
    from nestegg.core.utils.logging import configure_from_config

    config = load_config(config_path)
    configure_from_config(config, level_override=log_level)
    ctx.obj = config


# Register subcommands
from .budget_cmd import budget
from .credit_cmd import credit
from .mortgage_cmd import mortgage
from .savings_cmd import savings

main.add_command(mortgage)
main.add_command(budget)
main.add_command(savings)
main.add_command(credit)
