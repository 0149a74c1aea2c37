"""Query, statistics and calendar services."""

from .calendar import CalendarEvent, CalendarView, events_in_range, project, view_range
from .query import (
    DEFAULT_CUSTOMER_SORT,
    DEFAULT_TRAINING_SORT,
    SortState,
    query_customers,
    query_trainings,
    search,
    sort_records,
)
from .stats import ActivityReport, ActivityTotal, aggregate_by_activity, build_report

__all__ = [
    "ActivityReport",
    "ActivityTotal",
    "CalendarEvent",
    "CalendarView",
    "DEFAULT_CUSTOMER_SORT",
    "DEFAULT_TRAINING_SORT",
    "SortState",
    "aggregate_by_activity",
    "build_report",
    "events_in_range",
    "project",
    "query_customers",
    "query_trainings",
    "search",
    "sort_records",
    "view_range",
]
