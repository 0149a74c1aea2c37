"""pt-manager: customer and training-session manager for personal trainers."""

__version__ = "0.1.0"
