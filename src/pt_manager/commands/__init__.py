"""CLI commands for pt-manager."""

from .calendar import calendar
from .console import console
from .customers import customers
from .serve import serve
from .stats import stats
from .trainings import trainings

__all__ = [
    "calendar",
    "console",
    "customers",
    "serve",
    "stats",
    "trainings",
]
