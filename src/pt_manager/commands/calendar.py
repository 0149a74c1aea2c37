"""Training calendar command."""

from datetime import datetime

import click

from ..services.calendar import CalendarView, events_in_range, project, view_range
from .base import get_state
from .views import render_events


@click.command()
@click.option(
    "--view",
    "-v",
    type=click.Choice([v.value for v in CalendarView]),
    default=None,
    help="Only show one month, week or day",
)
@click.option(
    "--date",
    "-d",
    "anchor",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Day the view is centred on (default: today)",
)
@click.pass_context
def calendar(ctx, view: str | None, anchor: datetime | None):
    """Show training sessions as calendar events.

    Examples:
        # Every session
        pt-manager calendar

        # The week of 15 April 2025
        pt-manager calendar --view week --date 2025-04-15
    """
    state = get_state(ctx)
    events = project(state.trainings.list_all(), state.customer_name)

    if view:
        start, end = view_range(CalendarView(view), anchor or datetime.now())
        events = events_in_range(events, start, end)
        click.echo()
        click.echo(f"{start:%d.%m.%Y} - {end:%d.%m.%Y} ({view})")
    else:
        events = sorted(events, key=lambda e: e.start)

    click.echo()
    click.echo(render_events(events))
