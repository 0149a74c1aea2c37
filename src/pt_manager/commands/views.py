"""Text renderings of the customer, training, calendar and statistics views."""

from datetime import datetime

from ..models.customer import Customer
from ..models.training import TrainingSession
from ..services.calendar import CalendarEvent
from ..services.query import SortState
from ..services.stats import ActivityReport
from ..store.state import TrainerState
from .base import format_table

DATE_FORMAT = "%d.%m.%Y %H:%M"

CUSTOMER_COLUMNS = [
    ("first_name", "First Name"),
    ("last_name", "Last Name"),
    ("email", "Email"),
    ("phone", "Phone"),
]
TRAINING_COLUMNS = [
    ("date", "Date"),
    ("activity", "Activity"),
    ("duration", "Duration (min)"),
    ("customer", "Customer"),
]

BAR_WIDTH = 40


def format_date(value: datetime) -> str:
    """Format a session time as DD.MM.YYYY HH:MM."""
    return value.strftime(DATE_FORMAT)


def _headers(columns: list[tuple[str, str]], sort: SortState | None) -> list[str]:
    headers = []
    for field, label in columns:
        if sort and sort.field == field:
            label = f"{label} {sort.indicator}"
        headers.append(label)
    return headers


def render_customers(customers: list[Customer], sort: SortState | None = None) -> str:
    """Customer table in display order."""
    if not customers:
        return "No customers found."

    rows = [[c.id, c.first_name, c.last_name, c.email, c.phone] for c in customers]
    return format_table(["ID"] + _headers(CUSTOMER_COLUMNS, sort), rows)


def render_trainings(
    trainings: list[TrainingSession],
    state: TrainerState,
    sort: SortState | None = None,
) -> str:
    """Training table in display order, with resolved customer names."""
    if not trainings:
        return "No training sessions found."

    rows = [
        [
            t.id,
            format_date(t.date),
            t.activity,
            str(t.duration),
            state.customer_name(t.customer_id),
        ]
        for t in trainings
    ]
    return format_table(["ID"] + _headers(TRAINING_COLUMNS, sort), rows)


def render_events(events: list[CalendarEvent]) -> str:
    """Calendar events, one per line."""
    if not events:
        return "No training sessions in this period."

    lines = []
    for event in events:
        lines.append(
            f"{format_date(event.start)} - {event.end.strftime('%H:%M')}  {event.title}"
        )
    return "\n".join(lines)


def render_report(report: ActivityReport) -> str:
    """Minutes-per-activity bar chart with summary."""
    lines = ["Minutes per Activity", ""]

    if report.activities:
        name_width = max(len(a.name) for a in report.activities)
        top = report.activities[0].minutes
        for activity in report.activities:
            bar = "#" * max(1, round(activity.minutes / top * BAR_WIDTH))
            lines.append(f"{activity.name.ljust(name_width)}  {bar} {activity.minutes}")
        lines.append("")

    lines.append("Summary")
    lines.append(f"Total activities: {report.total_activities}")
    lines.append(f"Total training time: {report.total_minutes} minutes")
    if report.most_popular:
        lines.append(
            f"Most popular activity: {report.most_popular.name} "
            f"({report.most_popular.minutes} minutes)"
        )
    return "\n".join(lines)
