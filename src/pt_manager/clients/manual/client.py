"""Interactive customer and training forms."""

from datetime import datetime

import questionary
from questionary import Style

from ...models.customer import Customer
from ...models.training import ACTIVITY_OPTIONS, TrainingSession, parse_session_date

# Custom style for forms
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

FORM_DATE_FORMAT = "%Y-%m-%dT%H:%M"


def _required(value: str) -> bool | str:
    return bool(value and value.strip()) or "This field is required"


def _positive_int(value: str) -> bool | str:
    try:
        return int(value) > 0 or "Duration must be greater than zero"
    except (TypeError, ValueError):
        return "Enter a whole number of minutes"


def _valid_date(value: str) -> bool | str:
    try:
        parse_session_date(value.strip())
    except ValueError:
        return "Use YYYY-MM-DDTHH:MM"
    return True


class ManualInputClient:
    """Interactive forms for adding and editing records.

    Each collect method returns None if the user cancels (Ctrl+C).
    """

    async def collect_customer(self, existing: Customer | None = None) -> Customer | None:
        """Ask for customer fields. Editing keeps the existing ID."""
        print("\n=== Edit Customer ===\n" if existing else "\n=== Add Customer ===\n")

        answers = {}
        prompts = [
            ("first_name", "First name:", True),
            ("last_name", "Last name:", True),
            ("email", "Email:", True),
            ("phone", "Phone:", True),
            ("address", "Address:", False),
            ("city", "City:", False),
        ]
        for key, message, required in prompts:
            value = await questionary.text(
                message,
                default=getattr(existing, key) if existing else "",
                validate=_required if required else None,
                style=custom_style,
            ).ask_async()
            if value is None:
                return None
            answers[key] = value.strip()

        return Customer(id=existing.id if existing else "", **answers)

    async def collect_training(self, customers: list[Customer]) -> TrainingSession | None:
        """Ask for training fields. The customer is picked from the given list."""
        print("\n=== Add Training ===\n")

        if not customers:
            print("Add a customer first.")
            return None

        date_str = await questionary.text(
            "Date and time (YYYY-MM-DDTHH:MM):",
            default=datetime.now().strftime(FORM_DATE_FORMAT),
            validate=_valid_date,
            style=custom_style,
        ).ask_async()
        if date_str is None:
            return None

        activity = await questionary.select(
            "Activity:",
            choices=ACTIVITY_OPTIONS,
            style=custom_style,
        ).ask_async()
        if activity is None:
            return None

        duration = await questionary.text(
            "Duration (minutes):",
            default="30",
            validate=_positive_int,
            style=custom_style,
        ).ask_async()
        if duration is None:
            return None

        customer_id = await questionary.select(
            "Customer:",
            choices=[questionary.Choice(c.full_name, c.id) for c in customers],
            style=custom_style,
        ).ask_async()
        if customer_id is None:
            return None

        return TrainingSession(
            id="",
            date=parse_session_date(date_str.strip()),
            activity=activity,
            duration=int(duration),
            customer_id=customer_id,
        )
