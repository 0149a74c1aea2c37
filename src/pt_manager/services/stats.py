"""Minutes-per-activity statistics."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..models.training import TrainingSession

# Bar colors by rank, cycled when there are more activities than colors
CHART_COLORS = [
    "#8884d8", "#83a6ed", "#8dd1e1", "#82ca9d", "#a4de6c",
    "#d0ed57", "#ffc658", "#ff8042", "#ff5252", "#c64292",
]


def color_for(index: int) -> str:
    """Chart color for the bar at the given rank."""
    return CHART_COLORS[index % len(CHART_COLORS)]


@dataclass(frozen=True)
class ActivityTotal:
    """Total training minutes for one activity."""

    name: str
    minutes: int

    def to_dict(self) -> dict:
        return {"name": self.name, "minutes": self.minutes}


@dataclass
class ActivityReport:
    """Ranked activity totals with summary figures."""

    activities: list[ActivityTotal] = field(default_factory=list)

    @property
    def total_activities(self) -> int:
        return len(self.activities)

    @property
    def total_minutes(self) -> int:
        return sum(a.minutes for a in self.activities)

    @property
    def most_popular(self) -> ActivityTotal | None:
        """The activity with the most minutes, if any."""
        return self.activities[0] if self.activities else None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        most_popular = self.most_popular
        return {
            "activities": [
                {**a.to_dict(), "color": color_for(i)}
                for i, a in enumerate(self.activities)
            ],
            "total_activities": self.total_activities,
            "total_minutes": self.total_minutes,
            "most_popular": most_popular.to_dict() if most_popular else None,
        }


def aggregate_by_activity(sessions: Iterable[TrainingSession]) -> list[ActivityTotal]:
    """Sum session durations per activity, largest total first.

    Activities are grouped by exact label. Only labels present in the input
    are reported. Equal totals keep the order in which the activity was
    first seen.
    """
    totals: dict[str, int] = {}
    for session in sessions:
        totals[session.activity] = totals.get(session.activity, 0) + session.duration

    ranked = [ActivityTotal(name, minutes) for name, minutes in totals.items()]
    ranked.sort(key=lambda a: a.minutes, reverse=True)
    return ranked


def build_report(sessions: Iterable[TrainingSession]) -> ActivityReport:
    """Aggregate sessions into a full activity report."""
    return ActivityReport(activities=aggregate_by_activity(sessions))
