"""Sample customers and training sessions loaded on every start."""

from datetime import datetime
from uuid import uuid4

from ..models.customer import Customer
from ..models.training import TrainingSession


def generate_id() -> str:
    """Generate a unique record identifier."""
    return str(uuid4())


def initial_customers() -> list[Customer]:
    """Return the sample customer list."""
    return [
        Customer(
            id="c1",
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            phone="555-123-4567",
            address="123 Main St",
            city="Anytown",
        ),
        Customer(
            id="c2",
            first_name="Jane",
            last_name="Smith",
            email="jane.smith@example.com",
            phone="555-987-6543",
            address="456 Oak Ave",
            city="Somewhere",
        ),
        Customer(
            id="c3",
            first_name="Robert",
            last_name="Johnson",
            email="robert@example.com",
            phone="555-555-5555",
            address="789 Pine Rd",
            city="Nowhere",
        ),
        Customer(
            id="c4",
            first_name="Sarah",
            last_name="Williams",
            email="sarah@example.com",
            phone="555-222-3333",
            address="101 Elm St",
            city="Elsewhere",
        ),
        Customer(
            id="c5",
            first_name="Michael",
            last_name="Brown",
            email="michael@example.com",
            phone="555-444-7777",
            address="202 Cedar Ln",
            city="Anytown",
        ),
    ]


def initial_trainings() -> list[TrainingSession]:
    """Return the sample training sessions (each references a sample customer)."""
    return [
        TrainingSession("t1", datetime(2025, 4, 15, 10, 30), "Running", 30, "c1"),
        TrainingSession("t2", datetime(2025, 4, 16, 14, 0), "Yoga", 60, "c2"),
        TrainingSession("t3", datetime(2025, 4, 17, 9, 15), "Strength Training", 45, "c1"),
        TrainingSession("t4", datetime(2025, 4, 18, 16, 30), "Spinning", 45, "c3"),
        TrainingSession("t5", datetime(2025, 4, 19, 11, 0), "Swimming", 60, "c4"),
        TrainingSession("t6", datetime(2025, 4, 20, 13, 45), "Yoga", 75, "c2"),
        TrainingSession("t7", datetime(2025, 4, 21, 8, 0), "Running", 45, "c5"),
    ]
