"""Customer routes."""

from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import Response

from ...config import settings
from ...generators.csv_export import customers_to_csv
from ...models.customer import Customer
from ...services.query import CUSTOMER_SORT_FIELDS, SortState, query_customers
from ..schemas import CustomerIn

router = APIRouter(prefix="/customers", tags=["customers"])


def get_state(request: Request):
    """Get the trainer state from app state."""
    return request.app.state.trainer


def content_disposition(filename: str) -> str:
    """Attachment header value for a download named filename.

    The plain filename parameter is an ASCII quoted-string with backslashes
    and double quotes escaped; filename* carries the exact UTF-8 name.
    """
    fallback = filename.encode("ascii", "replace").decode("ascii")
    fallback = fallback.replace("\\", "\\\\").replace('"', '\\"')
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


@router.get("")
async def list_customers(
    request: Request,
    search: str = "",
    sort: str = "last_name",
    order: str = Query("asc", pattern="^(asc|desc)$"),
):
    """List customers, filtered by search text and sorted by one column."""
    if sort not in CUSTOMER_SORT_FIELDS:
        raise HTTPException(
            status_code=422,
            detail=f"Cannot sort by '{sort}'. Choose one of: {', '.join(CUSTOMER_SORT_FIELDS)}",
        )

    state = get_state(request)
    rows = query_customers(
        state.customers.list_all(),
        search_text=search,
        sort=SortState(sort, order == "asc"),
    )
    return [c.to_dict() for c in rows]


@router.get("/export")
async def export_customers(request: Request, filename: str | None = None):
    """Download every customer as a CSV file."""
    state = get_state(request)
    content = customers_to_csv(state.customers.list_all())
    filename = filename or settings.EXPORT_FILENAME
    if "\r" in filename or "\n" in filename:
        raise HTTPException(status_code=422, detail="Filename must be a single line")

    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": content_disposition(filename)},
    )


@router.post("", status_code=201)
async def add_customer(request: Request, body: CustomerIn):
    """Add a new customer. The ID is generated."""
    state = get_state(request)
    customer = Customer(id="", **body.model_dump())
    snapshot = state.customers.add(customer)
    return snapshot[-1].to_dict()


@router.get("/{customer_id}")
async def get_customer(request: Request, customer_id: str):
    """Get a single customer."""
    customer = get_state(request).customers.get(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")
    return customer.to_dict()


@router.put("/{customer_id}")
async def update_customer(request: Request, customer_id: str, body: CustomerIn):
    """Replace a customer's fields. The ID is kept."""
    state = get_state(request)
    if not state.customers.get(customer_id):
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")

    customer = Customer(id=customer_id, **body.model_dump())
    state.customers.update(customer)
    return customer.to_dict()


@router.delete("/{customer_id}")
async def delete_customer(request: Request, customer_id: str, confirm: bool = False):
    """Delete a customer once confirmed.

    The customer's training sessions are kept and show as "Unknown".
    """
    state = get_state(request)
    if not state.customers.get(customer_id):
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")

    if not confirm:
        return {"status": "cancelled", "id": customer_id}

    state.customers.delete(customer_id)
    return {"status": "deleted", "id": customer_id}
