"""Calendar events derived from training sessions."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from ..models.training import TrainingSession

TITLE_SEPARATOR = " – "


class CalendarView(str, Enum):
    """Calendar display range."""

    MONTH = "month"
    WEEK = "week"
    DAY = "day"


@dataclass(frozen=True)
class CalendarEvent:
    """A training session placed on the calendar."""

    id: str
    title: str
    start: datetime
    end: datetime

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }


def project(
    sessions: Iterable[TrainingSession],
    name_fn: Callable[[str], str],
) -> list[CalendarEvent]:
    """Turn each session into one calendar event, in input order.

    name_fn maps a customer ID to a display name and is expected to return
    a placeholder rather than fail for unknown IDs.
    """
    return [
        CalendarEvent(
            id=session.id,
            title=f"{session.activity}{TITLE_SEPARATOR}{name_fn(session.customer_id)}",
            start=session.date,
            end=session.date + timedelta(minutes=session.duration),
        )
        for session in sessions
    ]


def view_range(view: CalendarView, anchor: datetime) -> tuple[datetime, datetime]:
    """Half-open [start, end) window a view shows around the anchor date.

    Weeks start on Monday.
    """
    day = anchor.replace(hour=0, minute=0, second=0, microsecond=0)
    if view == CalendarView.DAY:
        return day, day + timedelta(days=1)
    if view == CalendarView.WEEK:
        start = day - timedelta(days=day.weekday())
        return start, start + timedelta(days=7)

    start = day.replace(day=1)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def events_in_range(
    events: Iterable[CalendarEvent], start: datetime, end: datetime
) -> list[CalendarEvent]:
    """Events overlapping [start, end), ordered by start time."""
    visible = [e for e in events if e.start < end and e.end > start]
    return sorted(visible, key=lambda e: e.start)
