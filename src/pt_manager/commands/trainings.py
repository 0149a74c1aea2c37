"""Training session commands."""

import click

from ..services.query import TRAINING_SORT_FIELDS, SortState, query_trainings
from .base import get_state
from .views import render_trainings


@click.group()
def trainings():
    """View training sessions."""


@trainings.command(name="list")
@click.option("--search", "-s", default="", help="Match customer name or activity")
@click.option(
    "--sort",
    "sort_field",
    type=click.Choice(TRAINING_SORT_FIELDS),
    default="date",
    help="Column to sort by",
)
@click.option("--desc", is_flag=True, help="Sort descending")
@click.pass_context
def list_trainings(ctx, search: str, sort_field: str, desc: bool):
    """List training sessions."""
    state = get_state(ctx)
    sort = SortState(sort_field, not desc)
    rows = query_trainings(
        state.trainings.list_all(), state.customer_lookup(), search, sort
    )

    click.echo()
    click.echo(render_trainings(rows, state, sort))
    click.echo()
    click.echo(f"Total: {len(rows)} session(s)")
