"""Sales statistics endpoints."""
from fastapi import APIRouter, Depends
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.stats_service import StatsService
from src.client.schemas import ClientStatsResponse, DailySalesResponse, GeneralStatsResponse
from src.app.api.mappers import (
    to_client_stats_response,
    to_daily_sales_response,
    to_general_stats_response,
)

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/sales-by-day", response_model=list[DailySalesResponse])
@inject
async def sales_by_day(
    service: StatsService = Depends(Provide[Container.stats_service]),
) -> list[DailySalesResponse]:
    """Total sale value and number of sales per day, oldest first."""
    return [to_daily_sales_response(day) for day in await service.sales_by_day()]


@router.get("/client-stats", response_model=ClientStatsResponse)
@inject
async def client_stats(
    service: StatsService = Depends(Provide[Container.stats_service]),
) -> ClientStatsResponse:
    """
    Leading clients by total volume, by average sale value and by purchase frequency.

    Each entry is null until at least one sale exists.
    """
    return to_client_stats_response(await service.client_stats())


@router.get("/general", response_model=GeneralStatsResponse)
@inject
async def general_stats(
    service: StatsService = Depends(Provide[Container.stats_service]),
) -> GeneralStatsResponse:
    """Client count, sale count, revenue and average sale value."""
    return to_general_stats_response(await service.general())
