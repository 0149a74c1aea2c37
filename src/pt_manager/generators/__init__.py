"""Output generators for pt-manager."""

from .csv_export import CSV_COLUMNS, customers_to_csv, export_customers

__all__ = [
    "CSV_COLUMNS",
    "customers_to_csv",
    "export_customers",
]
