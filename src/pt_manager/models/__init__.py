"""Data models for pt-manager."""

from .customer import Customer
from .training import ACTIVITY_OPTIONS, TrainingSession, parse_session_date

__all__ = [
    "ACTIVITY_OPTIONS",
    "Customer",
    "TrainingSession",
    "parse_session_date",
]
