"""Interactive form input."""

from .client import ManualInputClient

__all__ = ["ManualInputClient"]
