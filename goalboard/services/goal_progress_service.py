from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Protocol

from goalboard.utils.datetime_utils import DayLike, to_day

GOAL_STATUSES = ("active", "completed", "done")
ACTIVE_GOAL_STATUS = "active"
# "completed" and "done" both mean the goal is finished; neither is canonical.
FINISHED_GOAL_STATUSES = frozenset({"completed", "done"})


class HasCompletion(Protocol):
    completed: bool


class HasStatus(Protocol):
    status: str


@dataclass(frozen=True)
class MilestoneProgress:
    completed: int
    total: int

    @property
    def percent(self) -> float:
        if self.total <= 0:
            return 0.0
        return min(self.completed / self.total * 100, 100.0)

    @property
    def all_completed(self) -> bool:
        return self.total > 0 and self.completed == self.total


@dataclass(frozen=True)
class GoalStats:
    total: int
    active: int
    done: int


def is_finished(status: str) -> bool:
    return status in FINISHED_GOAL_STATUSES


def milestone_progress(milestones: Iterable[HasCompletion] | None) -> MilestoneProgress:
    items = list(milestones or [])
    return MilestoneProgress(
        completed=sum(1 for milestone in items if milestone.completed),
        total=len(items),
    )


def summarize_goals(goals: Iterable[HasStatus]) -> GoalStats:
    total = active = done = 0
    for goal in goals:
        total += 1
        if goal.status == ACTIVE_GOAL_STATUS:
            active += 1
        elif is_finished(goal.status):
            done += 1
    return GoalStats(total=total, active=active, done=done)


class GoalProgressService:
    def __init__(self, *, today_provider: Callable[[], date] | None = None) -> None:
        self._today_provider = today_provider or date.today

    def days_until(self, due_date: DayLike) -> int:
        return (to_day(due_date) - to_day(self._today_provider())).days

    def serialize_progress(
        self,
        *,
        milestones: Iterable[HasCompletion] | None,
        due_date: DayLike,
    ) -> dict[str, object]:
        progress = milestone_progress(milestones)
        return {
            "completed_milestones": progress.completed,
            "total_milestones": progress.total,
            "percent": round(progress.percent, 2),
            "days_left": self.days_until(due_date),
        }

    @staticmethod
    def serialize_stats(stats: GoalStats) -> dict[str, int]:
        return {"total": stats.total, "active": stats.active, "done": stats.done}
