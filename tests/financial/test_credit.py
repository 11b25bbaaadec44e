"""Tests for nestegg.financial.calculators.credit."""

from datetime import date

import pytest

from nestegg.core.exceptions import InvalidInputError
from nestegg.financial.calculators.credit import (
    CreditBand,
    CreditScoreEntry,
    classify_score,
    latest_score,
    progress_to_goal,
    score_changes,
    validate_score,
)


@pytest.fixture
def history():
    return [
        CreditScoreEntry(date(2025, 7, 1), 690),
        CreditScoreEntry(date(2025, 9, 1), 728, "Paid off card"),
        CreditScoreEntry(date(2025, 8, 1), 705),
    ]


class TestClassifyScore:
    @pytest.mark.parametrize(
        "score, band",
        [
            (850, CreditBand.EXCELLENT),
            (740, CreditBand.EXCELLENT),
            (739, CreditBand.GOOD),
            (670, CreditBand.GOOD),
            (669, CreditBand.FAIR),
            (580, CreditBand.FAIR),
            (579, CreditBand.POOR),
            (300, CreditBand.POOR),
        ],
    )
    def test_bands(self, score, band):
        assert classify_score(score) is band

    @pytest.mark.parametrize("score", [299, 851, 0])
    def test_out_of_range_raises(self, score):
        with pytest.raises(InvalidInputError, match="between 300 and 850"):
            classify_score(score)


class TestCreditScoreEntry:
    def test_band_property(self):
        assert CreditScoreEntry(date(2025, 1, 1), 745).band is CreditBand.EXCELLENT

    def test_invalid_score_raises(self):
        with pytest.raises(InvalidInputError):
            CreditScoreEntry(date(2025, 1, 1), 900)


class TestHistory:
    def test_latest_score(self, history):
        assert latest_score(history) == 728

    def test_latest_score_default(self):
        assert latest_score([]) == 720

    def test_score_changes_newest_first(self, history):
        changes = score_changes(history)
        assert [(entry.score, change) for entry, change in changes] == [(728, 23), (705, 15), (690, 0)]

    def test_score_changes_empty(self):
        assert score_changes([]) == []


class TestProgressToGoal:
    def test_points_remaining(self):
        assert progress_to_goal(720, 750) == 30

    def test_goal_met(self):
        assert progress_to_goal(760, 750) == 0


class TestValidateScore:
    def test_bounds_inclusive(self):
        assert validate_score(300) == 300
        assert validate_score(850) == 850

    @pytest.mark.parametrize("score", [299, 851, 720.5, True, "720"])
    def test_rejects(self, score):
        with pytest.raises(InvalidInputError):
            validate_score(score)
