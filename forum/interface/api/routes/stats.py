"""Statistics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from forum.application.usecase.stats import GetStatsUseCase, StatsResponse
from forum.interface.api.errors import to_http_error

router = APIRouter(tags=["stats"], route_class=DishkaRoute)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(get_stats_use_case: FromDishka[GetStatsUseCase]) -> StatsResponse:
    """Count users and threads."""
    try:
        return await get_stats_use_case.execute()
    except Exception as e:
        raise to_http_error(e, "Stats")
