"""Training session routes."""

from fastapi import APIRouter, HTTPException, Query, Request

from ...models.training import ACTIVITY_OPTIONS, TrainingSession
from ...services.query import TRAINING_SORT_FIELDS, SortState, query_trainings
from ..schemas import TrainingIn

router = APIRouter(prefix="/trainings", tags=["trainings"])


def get_state(request: Request):
    """Get the trainer state from app state."""
    return request.app.state.trainer


def _training_row(training: TrainingSession, state) -> dict:
    return {
        **training.to_dict(),
        "customer_name": state.customer_name(training.customer_id),
    }


@router.get("")
async def list_trainings(
    request: Request,
    search: str = "",
    sort: str = "date",
    order: str = Query("asc", pattern="^(asc|desc)$"),
):
    """List training sessions with their customer names.

    Search matches the customer name or the activity. Sorting by "customer"
    sorts on the resolved name.
    """
    if sort not in TRAINING_SORT_FIELDS:
        raise HTTPException(
            status_code=422,
            detail=f"Cannot sort by '{sort}'. Choose one of: {', '.join(TRAINING_SORT_FIELDS)}",
        )

    state = get_state(request)
    rows = query_trainings(
        state.trainings.list_all(),
        state.customer_lookup(),
        search_text=search,
        sort=SortState(sort, order == "asc"),
    )
    return [_training_row(t, state) for t in rows]


@router.get("/activities")
async def list_activities():
    """Suggested activity labels for the training form."""
    return ACTIVITY_OPTIONS


@router.post("", status_code=201)
async def add_training(request: Request, body: TrainingIn):
    """Book a training session for an existing customer."""
    state = get_state(request)
    if not state.customers.get(body.customer_id):
        raise HTTPException(
            status_code=422, detail=f"Customer {body.customer_id} not found"
        )

    training = TrainingSession(id="", **body.model_dump())
    snapshot = state.trainings.add(training)
    return _training_row(snapshot[-1], state)


@router.get("/{training_id}")
async def get_training(request: Request, training_id: str):
    """Get a single training session."""
    state = get_state(request)
    training = state.trainings.get(training_id)
    if not training:
        raise HTTPException(status_code=404, detail=f"Training {training_id} not found")
    return _training_row(training, state)


@router.delete("/{training_id}")
async def delete_training(request: Request, training_id: str, confirm: bool = False):
    """Delete a training session once confirmed."""
    state = get_state(request)
    if not state.trainings.get(training_id):
        raise HTTPException(status_code=404, detail=f"Training {training_id} not found")

    if not confirm:
        return {"status": "cancelled", "id": training_id}

    state.trainings.delete(training_id)
    return {"status": "deleted", "id": training_id}
