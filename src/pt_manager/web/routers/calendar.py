"""Calendar routes."""

from datetime import date, datetime

from fastapi import APIRouter, Request

from ...services.calendar import CalendarView, events_in_range, project, view_range

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("")
async def calendar_events(
    request: Request,
    view: CalendarView | None = None,
    day: date | None = None,
):
    """Training sessions as calendar events.

    Without a view, every event is returned in booking order. With a view,
    only events overlapping the month, week or day around `day` (default
    today) are returned, ordered by start time.
    """
    state = request.app.state.trainer
    events = project(state.trainings.list_all(), state.customer_name)

    if view is not None:
        anchor = datetime.combine(day or date.today(), datetime.min.time())
        start, end = view_range(view, anchor)
        events = events_in_range(events, start, end)

    return [e.to_dict() for e in events]
