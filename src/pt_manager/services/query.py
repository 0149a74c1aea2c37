"""Search and sort over store snapshots.

All functions are pure: they take a snapshot and return a new list. The
current search text and sort column belong to whoever is displaying the
list, and are passed in on every call.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

from ..errors import UNKNOWN_CUSTOMER
from ..models.customer import Customer
from ..models.training import TrainingSession, parse_session_date

T = TypeVar("T")

# Fields compared by time value instead of text
DATE_FIELDS = {"date"}

# The customer table displays the first four
CUSTOMER_SORT_FIELDS = ["first_name", "last_name", "email", "phone", "address", "city"]
TRAINING_SORT_FIELDS = ["date", "activity", "duration", "customer"]


@dataclass(frozen=True)
class SortState:
    """The active sort column and direction of a list view."""

    field: str
    ascending: bool = True

    def toggle(self, field: str) -> "SortState":
        """Sort by field: flip direction if already sorted by it, else ascending."""
        if field == self.field:
            return SortState(field, not self.ascending)
        return SortState(field, True)

    @property
    def indicator(self) -> str:
        return "▲" if self.ascending else "▼"


DEFAULT_CUSTOMER_SORT = SortState("last_name")
DEFAULT_TRAINING_SORT = SortState("date")


def search(records: Iterable[T], query: str, text_fn: Callable[[T], str]) -> list[T]:
    """Keep records whose searchable text contains the query, ignoring case."""
    needle = (query or "").lower()
    if not needle:
        return list(records)
    return [r for r in records if needle in text_fn(r).lower()]


def _text_key(value: Any) -> str:
    if value is None:
        return ""
    return str(value).lower()


def _date_key(value: Any) -> datetime:
    if not value:
        return datetime.min
    return parse_session_date(value)


def sort_records(
    records: Iterable[T],
    field: str,
    ascending: bool = True,
    accessor: Callable[[T], Any] | None = None,
) -> list[T]:
    """Stable sort of records by one field.

    Values compare as lowercase text, except date fields which compare by
    time. A missing value counts as empty and sorts first when ascending.
    The accessor, if given, supplies the value for fields that are not
    attributes of the record (e.g. a joined customer name). Keys are computed
    once per record.
    """
    if accessor is None:
        def accessor(record):
            return getattr(record, field, None)

    key_fn = _date_key if field in DATE_FIELDS else _text_key
    return sorted(records, key=lambda r: key_fn(accessor(r)), reverse=not ascending)


def resolve_customer_name(customer_id: str, customers: Mapping[str, Customer]) -> str:
    """Full name for a customer ID, or the placeholder if it does not resolve."""
    customer = customers.get(customer_id)
    return customer.full_name if customer else UNKNOWN_CUSTOMER


def customer_search_text(customer: Customer) -> str:
    return f"{customer.first_name} {customer.last_name} {customer.email}"


def training_search_text(
    customers: Mapping[str, Customer],
) -> Callable[[TrainingSession], str]:
    """Searchable text for sessions: the customer name or the activity.

    The values are joined by a newline so a typed query matches one of them,
    never a span across both.
    """

    def text(training: TrainingSession) -> str:
        return f"{resolve_customer_name(training.customer_id, customers)}\n{training.activity}"

    return text


def training_accessor(
    field: str, customers: Mapping[str, Customer]
) -> Callable[[TrainingSession], Any] | None:
    """Accessor for derived training fields, or None for plain attributes."""
    if field == "customer":
        return lambda t: resolve_customer_name(t.customer_id, customers)
    return None


def query_customers(
    customers: Iterable[Customer],
    search_text: str = "",
    sort: SortState = DEFAULT_CUSTOMER_SORT,
) -> list[Customer]:
    """Filter then sort customers the way the customer list shows them."""
    matches = search(customers, search_text, customer_search_text)
    return sort_records(matches, sort.field, sort.ascending)


def query_trainings(
    trainings: Iterable[TrainingSession],
    customers: Mapping[str, Customer],
    search_text: str = "",
    sort: SortState = DEFAULT_TRAINING_SORT,
) -> list[TrainingSession]:
    """Filter then sort training sessions, joining customer names as needed."""
    matches = search(trainings, search_text, training_search_text(customers))
    return sort_records(
        matches,
        sort.field,
        sort.ascending,
        accessor=training_accessor(sort.field, customers),
    )
