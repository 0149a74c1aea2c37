"""Customer commands."""

import click

from ..config import settings
from ..generators.csv_export import customers_to_csv, export_customers
from ..services.query import CUSTOMER_SORT_FIELDS, SortState, query_customers
from .base import echo_error, echo_info, echo_success, get_state
from .views import render_customers


@click.group()
def customers():
    """View and export customers."""


@customers.command(name="list")
@click.option("--search", "-s", default="", help="Match first name, last name or email")
@click.option(
    "--sort",
    "sort_field",
    type=click.Choice(CUSTOMER_SORT_FIELDS),
    default="last_name",
    help="Column to sort by",
)
@click.option("--desc", is_flag=True, help="Sort descending")
@click.pass_context
def list_customers(ctx, search: str, sort_field: str, desc: bool):
    """List customers."""
    state = get_state(ctx)
    sort = SortState(sort_field, not desc)
    rows = query_customers(state.customers.list_all(), search, sort)

    click.echo()
    click.echo(render_customers(rows, sort))
    click.echo()
    click.echo(f"Total: {len(rows)} customer(s)")


@customers.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="File to write (default from PT_MANAGER_EXPORT_FILENAME)",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print CSV instead of writing a file")
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of writing a file",
)
@click.pass_context
def export(ctx, output: str | None, to_stdout: bool, clipboard: bool):
    """Export all customers to CSV.

    Examples:
        # Write customers.csv
        pt-manager customers export

        # Choose the file name
        pt-manager customers export -o clients.csv

        # Print to the terminal
        pt-manager customers export --stdout
    """
    state = get_state(ctx)
    all_customers = state.customers.list_all()

    if to_stdout:
        click.echo(customers_to_csv(all_customers), nl=False)
        return

    if clipboard:
        try:
            import pyperclip

            pyperclip.copy(customers_to_csv(all_customers))
            echo_success("Copied to clipboard!")
        except ImportError:
            echo_error("pyperclip not installed. Install with: pip install pyperclip")
            ctx.exit(1)
        return

    path = export_customers(all_customers, output or settings.EXPORT_FILENAME)
    echo_success(f"Exported {len(all_customers)} customer(s) to {path}")
    if not all_customers:
        echo_info("The file only contains the header row")
