"""Top-level application state."""

from dataclasses import dataclass, field

from ..data.mock_data import initial_customers, initial_trainings
from ..errors import UNKNOWN_CUSTOMER
from ..models.customer import Customer
from .repositories import CustomerStore, TrainingStore


@dataclass
class TrainerState:
    """Owns the customer and training stores for one session."""

    customers: CustomerStore = field(default_factory=CustomerStore)
    trainings: TrainingStore = field(default_factory=TrainingStore)

    @classmethod
    def seeded(cls) -> "TrainerState":
        """Create state loaded with the sample records."""
        return cls(
            customers=CustomerStore(initial_customers()),
            trainings=TrainingStore(initial_trainings()),
        )

    def customer_lookup(self) -> dict[str, Customer]:
        """Map customer ID to customer over the current snapshot."""
        return {c.id: c for c in self.customers.list_all()}

    def customer_name(self, customer_id: str) -> str:
        """Resolve a customer's full name, or the placeholder if not found."""
        customer = self.customers.get(customer_id)
        return customer.full_name if customer else UNKNOWN_CUSTOMER
