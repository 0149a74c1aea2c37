"""Customer data model."""

from dataclasses import dataclass

from ..errors import ValidationError

REQUIRED_FIELDS = ("id", "first_name", "last_name", "email", "phone")


@dataclass(frozen=True)
class Customer:
    """A personal-training customer.

    The id is assigned once at creation and preserved on edits. Email and
    phone are free text; no format or uniqueness checks are made.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str = ""
    city: str = ""

    @property
    def full_name(self) -> str:
        """First and last name joined for display."""
        return f"{self.first_name} {self.last_name}"

    def validate(self) -> None:
        """Raise ValidationError if any required field is empty."""
        missing = [
            name for name in REQUIRED_FIELDS
            if not str(getattr(self, name) or "").strip()
        ]
        if missing:
            raise ValidationError(
                f"Customer is missing required field(s): {', '.join(missing)}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "city": self.city,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Customer":
        """Create from dictionary."""
        return cls(
            id=data.get("id", ""),
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            phone=data["phone"],
            address=data.get("address") or "",
            city=data.get("city") or "",
        )
