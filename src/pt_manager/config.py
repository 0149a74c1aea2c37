"""
pt-manager configuration, read from environment variables at runtime.
"""

import os


class Settings:
    """Application settings from environment variables."""

    # Web server
    HOST: str = os.environ.get("PT_MANAGER_HOST", "127.0.0.1")
    PORT: int = int(os.environ.get("PT_MANAGER_PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.environ.get("PT_MANAGER_LOG_LEVEL", "WARNING").upper()

    # CSV export
    EXPORT_FILENAME: str = os.environ.get("PT_MANAGER_EXPORT_FILENAME", "customers.csv")


settings = Settings()
