"""Interactive console over one in-memory session."""

from datetime import datetime

import click
import questionary

from ..clients.manual import ManualInputClient
from ..clients.manual.client import custom_style
from ..config import settings
from ..errors import ValidationError
from ..generators.csv_export import export_customers
from ..services.calendar import CalendarView, events_in_range, project, view_range
from ..services.query import (
    DEFAULT_CUSTOMER_SORT,
    DEFAULT_TRAINING_SORT,
    query_customers,
    query_trainings,
)
from ..services.stats import build_report
from ..store.state import TrainerState
from .base import async_command, echo_error, echo_info, echo_success, get_state
from .views import (
    CUSTOMER_COLUMNS,
    TRAINING_COLUMNS,
    render_customers,
    render_events,
    render_report,
    render_trainings,
)


class ConsoleSession:
    """Menu loop holding the list views' search and sort choices."""

    def __init__(self, state: TrainerState, client: ManualInputClient | None = None):
        self.state = state
        self.client = client or ManualInputClient()
        self.customer_search = ""
        self.customer_sort = DEFAULT_CUSTOMER_SORT
        self.training_search = ""
        self.training_sort = DEFAULT_TRAINING_SORT

    async def run(self) -> None:
        """Main menu."""
        while True:
            choice = await questionary.select(
                "Personal Trainer",
                choices=["Customers", "Trainings", "Calendar", "Statistics", "Quit"],
                style=custom_style,
            ).ask_async()

            if choice in (None, "Quit"):
                return
            if choice == "Customers":
                await self.customers_menu()
            elif choice == "Trainings":
                await self.trainings_menu()
            elif choice == "Calendar":
                await self.calendar_menu()
            elif choice == "Statistics":
                click.echo()
                click.echo(render_report(build_report(self.state.trainings.list_all())))
                click.echo()

    async def _pick(self, message: str, records, label) -> str | None:
        if not records:
            echo_info("Nothing to choose from")
            return None
        return await questionary.select(
            message,
            choices=[questionary.Choice(label(r), r.id) for r in records]
            + [questionary.Choice("Cancel", "")],
            style=custom_style,
        ).ask_async()

    async def _confirm(self, message: str) -> bool:
        answer = await questionary.confirm(message, default=False, style=custom_style).ask_async()
        return bool(answer)

    async def _sort_column(self, columns: list[tuple[str, str]]) -> str | None:
        return await questionary.select(
            "Sort by (choosing the current column reverses it):",
            choices=[questionary.Choice(label, field) for field, label in columns],
            style=custom_style,
        ).ask_async()

    async def customers_menu(self) -> None:
        while True:
            rows = query_customers(
                self.state.customers.list_all(), self.customer_search, self.customer_sort
            )
            click.echo()
            if self.customer_search:
                click.echo(f"Search: {self.customer_search}")
            click.echo(render_customers(rows, self.customer_sort))
            click.echo()

            action = await questionary.select(
                "Customers",
                choices=["Search", "Sort", "Add", "Edit", "Delete", "Export to CSV", "Back"],
                style=custom_style,
            ).ask_async()

            if action in (None, "Back"):
                return
            if action == "Search":
                text = await questionary.text(
                    "Search customers:", default=self.customer_search, style=custom_style
                ).ask_async()
                if text is not None:
                    self.customer_search = text
            elif action == "Sort":
                field = await self._sort_column(CUSTOMER_COLUMNS)
                if field:
                    self.customer_sort = self.customer_sort.toggle(field)
            elif action == "Add":
                customer = await self.client.collect_customer()
                if customer:
                    self._apply(lambda: self.state.customers.add(customer), "Customer added")
            elif action == "Edit":
                customer_id = await self._pick("Edit which customer?", rows, lambda c: c.full_name)
                existing = self.state.customers.get(customer_id) if customer_id else None
                if existing:
                    customer = await self.client.collect_customer(existing)
                    if customer:
                        self._apply(
                            lambda: self.state.customers.update(customer), "Customer updated"
                        )
            elif action == "Delete":
                customer_id = await self._pick("Delete which customer?", rows, lambda c: c.full_name)
                if customer_id:
                    confirmed = await self._confirm("Are you sure you want to delete this customer?")
                    self.state.customers.delete(customer_id, confirm=lambda: confirmed)
                    if confirmed:
                        echo_success("Customer deleted")
            elif action == "Export to CSV":
                path = export_customers(self.state.customers.list_all(), settings.EXPORT_FILENAME)
                echo_success(f"Exported to {path}")

    async def trainings_menu(self) -> None:
        while True:
            lookup = self.state.customer_lookup()
            rows = query_trainings(
                self.state.trainings.list_all(),
                lookup,
                self.training_search,
                self.training_sort,
            )
            click.echo()
            if self.training_search:
                click.echo(f"Search: {self.training_search}")
            click.echo(render_trainings(rows, self.state, self.training_sort))
            click.echo()

            action = await questionary.select(
                "Training Sessions",
                choices=["Search", "Sort", "Add", "Delete", "Back"],
                style=custom_style,
            ).ask_async()

            if action in (None, "Back"):
                return
            if action == "Search":
                text = await questionary.text(
                    "Search trainings:", default=self.training_search, style=custom_style
                ).ask_async()
                if text is not None:
                    self.training_search = text
            elif action == "Sort":
                field = await self._sort_column(TRAINING_COLUMNS)
                if field:
                    self.training_sort = self.training_sort.toggle(field)
            elif action == "Add":
                training = await self.client.collect_training(
                    list(self.state.customers.list_all())
                )
                if training:
                    self._apply(lambda: self.state.trainings.add(training), "Training added")
            elif action == "Delete":
                training_id = await self._pick(
                    "Delete which session?",
                    rows,
                    lambda t: f"{t.date:%d.%m.%Y %H:%M} {t.activity} ({self.state.customer_name(t.customer_id)})",
                )
                if training_id:
                    confirmed = await self._confirm(
                        "Are you sure you want to delete this training session?"
                    )
                    self.state.trainings.delete(training_id, confirm=lambda: confirmed)
                    if confirmed:
                        echo_success("Training deleted")

    async def calendar_menu(self) -> None:
        view = await questionary.select(
            "View:",
            choices=[questionary.Choice(v.value.capitalize(), v) for v in CalendarView],
            style=custom_style,
        ).ask_async()
        if view is None:
            return

        day = await questionary.text(
            "Date (YYYY-MM-DD):",
            default=datetime.now().strftime("%Y-%m-%d"),
            style=custom_style,
        ).ask_async()
        if day is None:
            return
        try:
            anchor = datetime.strptime(day.strip(), "%Y-%m-%d")
        except ValueError:
            echo_error(f"Invalid date: {day}")
            return

        start, end = view_range(view, anchor)
        events = events_in_range(
            project(self.state.trainings.list_all(), self.state.customer_name), start, end
        )
        click.echo()
        click.echo(render_events(events))
        click.echo()

    def _apply(self, mutation, message: str) -> None:
        try:
            mutation()
        except ValidationError as e:
            echo_error(str(e))
            return
        echo_success(message)


@click.command()
@click.pass_context
@async_command
async def console(ctx):
    """Manage customers and trainings interactively.

    Changes last until you quit; every start begins from the sample data.
    """
    session = ConsoleSession(get_state(ctx))
    await session.run()
