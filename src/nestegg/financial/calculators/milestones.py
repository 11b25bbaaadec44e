"""Milestone tracking for the home-buying plan.

Milestones are immutable; status changes return a new record.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date, timedelta
from enum import Enum

from nestegg.core.exceptions import InvalidInputError
from nestegg.financial.validation import require_choice


class MilestoneStatus(Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"


@dataclass(frozen=True)
class Milestone:
    """A dated goal, e.g. "Save $10,000" or "Improve credit score to 740".

    Attributes:
        description: What needs to happen.
        target_date: When it should be done by.
        status: Pending or Completed.
        alert: Whether the user wants reminders as the date approaches.
    """

    description: str
    target_date: date
    status: MilestoneStatus = MilestoneStatus.PENDING
    alert: bool = True

    def __post_init__(self):
        if not self.description or not self.description.strip():
            raise InvalidInputError("description", self.description, "cannot be empty")
        if not isinstance(self.target_date, date):
            raise InvalidInputError("target_date", self.target_date, "must be a date")
        object.__setattr__(self, "status", require_choice("status", MilestoneStatus, self.status))

    @property
    def is_completed(self) -> bool:
        return self.status is MilestoneStatus.COMPLETED


def toggle_status(milestone: Milestone) -> Milestone:
    """Flip Pending <-> Completed."""
    new_status = MilestoneStatus.PENDING if milestone.is_completed else MilestoneStatus.COMPLETED
    return replace(milestone, status=new_status)


def completion_ratio(milestones: Sequence[Milestone]) -> float:
    """Share of milestones completed; 0 for an empty plan."""
    if not milestones:
        return 0.0
    return sum(1 for m in milestones if m.is_completed) / len(milestones)


def overdue(milestones: Sequence[Milestone], today: date) -> list[Milestone]:
    """Pending milestones whose target date has passed, oldest first."""
    return sorted(
        (m for m in milestones if not m.is_completed and m.target_date < today),
        key=lambda m: m.target_date,
    )


def alerting(milestones: Sequence[Milestone], today: date, within_days: int = 30) -> list[Milestone]:
    """Pending milestones with alerts on that are due within ``within_days`` (overdue included)."""
    if within_days < 0:
        raise InvalidInputError("within_days", within_days, "must be >= 0")
    horizon = today + timedelta(days=within_days)
    return sorted(
        (m for m in milestones if m.alert and not m.is_completed and m.target_date <= horizon),
        key=lambda m: m.target_date,
    )
