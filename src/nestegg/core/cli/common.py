"""Shared helpers for CLI commands."""

from __future__ import annotations

import functools
from pathlib import Path

import click
from loguru import logger

from nestegg.core.exceptions import NestEggError

NESTEGG_DIR = Path.home() / ".nestegg"
DEFAULT_CONFIG_PATH = NESTEGG_DIR / "config.yaml"


def load_config(config_path: str):
    """Load config, falling back to built-in defaults when the file is missing."""
    from nestegg.core.config import Config

    try:
        return Config(config_file=config_path, data_dir=str(NESTEGG_DIR))
    except NestEggError as e:
        raise click.ClickException(str(e)) from e


def user_settings(ctx: click.Context):
    """Typed defaults from the config attached to the CLI context."""
    try:
        return ctx.obj.user_settings()
    except NestEggError as e:
        raise click.ClickException(str(e)) from e


def reports_errors(func):
    """Turn library errors into clean CLI failures (exit code 1, message on stderr)."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except NestEggError as e:
            logger.debug(f"{func.__name__} failed: {e!r}")
            raise click.ClickException(str(e)) from e

    return wrapper


def money(amount: float) -> str:
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def percent(ratio: float) -> str:
    return f"{ratio * 100:.1f}%"
