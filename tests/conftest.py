"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from pt_manager.models.customer import Customer
from pt_manager.models.training import TrainingSession
from pt_manager.store.state import TrainerState
from pt_manager.web import create_app


@pytest.fixture
def state():
    """Fresh state loaded with the sample records."""
    return TrainerState.seeded()


@pytest.fixture
def sample_customer():
    """A customer that is not part of the sample data."""
    return Customer(
        id="c9",
        first_name="Ann",
        last_name="Lee",
        email="ann.lee@example.com",
        phone="555-000-1111",
        address="9 Birch Way",
        city="Lakeside",
    )


@pytest.fixture
def sample_training():
    """A training session for customer c2."""
    return TrainingSession(
        id="t9",
        date=datetime(2025, 5, 1, 9, 0),
        activity="Pilates",
        duration=50,
        customer_id="c2",
    )


@pytest.fixture
def client(state):
    """API test client over a seeded state."""
    return TestClient(create_app(state))
