"""Seed data for pt-manager."""

from .mock_data import generate_id, initial_customers, initial_trainings

__all__ = [
    "generate_id",
    "initial_customers",
    "initial_trainings",
]
