"""Statistics routes."""

from fastapi import APIRouter, Request

from ...services.stats import build_report

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
async def activity_stats(request: Request):
    """Minutes per activity, most popular first, with summary totals."""
    state = request.app.state.trainer
    return build_report(state.trainings.list_all()).to_dict()
