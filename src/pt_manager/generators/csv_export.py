"""CSV export of the customer list.

Format:
```
First Name,Last Name,Email,Phone,Address,City
"John","Doe","john.doe@example.com","555-123-4567","123 Main St","Anytown"
```
The header is written bare; every data value is quoted, with embedded
quotes doubled. Each row, including the last, ends with a single newline.
"""

import csv
import io
from collections.abc import Iterable
from pathlib import Path

from ..models.customer import Customer

CSV_COLUMNS = ["First Name", "Last Name", "Email", "Phone", "Address", "City"]
CSV_FIELDS = ["first_name", "last_name", "email", "phone", "address", "city"]

DEFAULT_FILENAME = "customers.csv"


def customers_to_csv(customers: Iterable[Customer]) -> str:
    """Serialize customers to CSV text."""
    buffer = io.StringIO()
    buffer.write(",".join(CSV_COLUMNS) + "\n")

    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for customer in customers:
        writer.writerow([getattr(customer, key) or "" for key in CSV_FIELDS])

    return buffer.getvalue()


def export_customers(
    customers: Iterable[Customer], path: str | Path = DEFAULT_FILENAME
) -> Path:
    """Write customers as CSV to path and return the path."""
    path = Path(path)
    # newline="" keeps "\n" from being translated on Windows
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(customers_to_csv(customers))
    return path
