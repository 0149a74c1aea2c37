"""Training statistics command."""

import click

from ..services.stats import build_report
from .base import get_state
from .views import render_report


@click.command()
@click.pass_context
def stats(ctx):
    """Show total training minutes per activity."""
    state = get_state(ctx)
    click.echo()
    click.echo(render_report(build_report(state.trainings.list_all())))
