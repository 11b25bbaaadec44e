"""Credit score history.

Bands follow the common FICO cut-offs. History lists are ordered newest
first, the way score entries are usually listed.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum

from nestegg.core.exceptions import InvalidInputError

MIN_SCORE = 300
MAX_SCORE = 850
DEFAULT_SCORE = 720


class CreditBand(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


# (lower bound, band), checked top-down
_BAND_FLOORS = (
    (740, CreditBand.EXCELLENT),
    (670, CreditBand.GOOD),
    (580, CreditBand.FAIR),
)


def validate_score(score: int) -> int:
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidInputError("score", score, "must be a whole number")
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidInputError("score", score, f"must be between {MIN_SCORE} and {MAX_SCORE}")
    return score


@dataclass(frozen=True)
class CreditScoreEntry:
    date: date
    score: int
    notes: str = ""

    def __post_init__(self):
        validate_score(self.score)

    @property
    def band(self) -> CreditBand:
        return classify_score(self.score)


def classify_score(score: int) -> CreditBand:
    """Map a score to its band (Excellent, Good, Fair, Poor)."""
    validate_score(score)
    for floor, band in _BAND_FLOORS:
        if score >= floor:
            return band
    return CreditBand.POOR


def latest_score(history: Sequence[CreditScoreEntry], default: int = DEFAULT_SCORE) -> int:
    """Most recent score, or ``default`` when nothing has been recorded."""
    if not history:
        return default
    return max(history, key=lambda e: e.date).score


def score_changes(history: Sequence[CreditScoreEntry]) -> list[tuple[CreditScoreEntry, int]]:
    """Pair each entry with its change from the previous (older) entry.

    Returns entries newest first; the oldest entry has a change of 0.
    """
    ordered = sorted(history, key=lambda e: e.date, reverse=True)
    changes = []
    for i, entry in enumerate(ordered):
        previous = ordered[i + 1] if i + 1 < len(ordered) else None
        changes.append((entry, entry.score - previous.score if previous else 0))
    return changes


def progress_to_goal(score: int, goal: int) -> int:
    """Points still needed to reach ``goal``; 0 once it is met."""
    validate_score(score)
    validate_score(goal)
    return max(0, goal - score)
