"""Shared test fixtures for nestegg."""

import os
import tempfile
from datetime import date

import pytest

from nestegg.financial.models import Transaction


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture(autouse=True)
def _clear_nestegg_env(monkeypatch):
    """Keep a developer's NESTEGG_* variables out of config tests."""
    for key in list(os.environ):
        if key.startswith("NESTEGG_"):
            monkeypatch.delenv(key)


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file with a few overridden defaults."""
    import yaml

    config_data = {
        "logging": {"level": "ERROR"},
        "defaults": {
            "default_income": 6000,
            "default_expenses": {"rent": 1000, "food": 500},
            "default_debt": {"car": 250},
            "credit_score_goal": 760,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def september_transactions():
    return [
        Transaction("income", "Salary", 5000, date(2025, 9, 1)),
        Transaction("income", "Freelance", 800, date(2025, 9, 15)),
        Transaction("expense", "Rent", 1200, date(2025, 9, 2)),
        Transaction("expense", "Food", 300, date(2025, 9, 10)),
        Transaction("expense", "Food", 150, date(2025, 9, 24)),
        Transaction("debt_payment", "Car", 250, date(2025, 9, 5)),
        Transaction("savings_contribution", "Down Payment", 500, date(2025, 9, 30)),
        # Neighbouring months must not leak into September
        Transaction("income", "Salary", 5000, date(2025, 8, 31)),
        Transaction("expense", "Rent", 1200, date(2025, 10, 1)),
    ]
