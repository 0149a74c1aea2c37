"""Training session data model."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ..errors import ValidationError

# Suggested labels for the activity picker. Not enforced anywhere in the core.
ACTIVITY_OPTIONS = [
    "Running",
    "Yoga",
    "Strength Training",
    "Spinning",
    "Swimming",
    "Pilates",
    "Boxing",
    "Cycling",
    "HIIT",
    "Stretching",
]


def parse_session_date(value: str | datetime) -> datetime:
    """Parse an ISO-8601 timestamp into a naive wall-clock datetime.

    A bare date means midnight. Timestamps carrying an offset are converted
    to UTC and stored without tzinfo so every session compares against the
    same naive clock.
    """
    if isinstance(value, str):
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        value = datetime.fromisoformat(value)

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


@dataclass(frozen=True)
class TrainingSession:
    """A single training session booked for a customer.

    customer_id is a weak reference: the customer may have been deleted, in
    which case name lookups fall back to a placeholder.
    """

    id: str
    date: datetime
    activity: str
    duration: int  # minutes
    customer_id: str

    @property
    def end(self) -> datetime:
        """Session end time (start plus duration)."""
        return self.date + timedelta(minutes=self.duration)

    def validate(self) -> None:
        """Raise ValidationError if the session is incomplete."""
        problems = []
        if not str(self.id or "").strip():
            problems.append("id")
        if self.date is None:
            problems.append("date")
        if not str(self.activity or "").strip():
            problems.append("activity")
        if not str(self.customer_id or "").strip():
            problems.append("customer_id")
        if problems:
            raise ValidationError(
                f"Training session is missing required field(s): {', '.join(problems)}"
            )

        if (
            isinstance(self.duration, bool)
            or not isinstance(self.duration, int)
            or self.duration <= 0
        ):
            raise ValidationError(
                f"Duration must be a positive number of minutes, got {self.duration!r}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "activity": self.activity,
            "duration": self.duration,
            "customer_id": self.customer_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TrainingSession":
        """Create from dictionary."""
        return cls(
            id=data.get("id", ""),
            date=parse_session_date(data["date"]),
            activity=data["activity"],
            duration=data["duration"],
            customer_id=data["customer_id"],
        )
