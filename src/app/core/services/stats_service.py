"""Sales statistics over clients and their purchases."""
import asyncio
import logging

from src.app.core.domain.models import ClientStats, DailySales, GeneralStats
from src.app.infrastructure.stats_repository import StatsRepository

logger = logging.getLogger(__name__)


class StatsService:
    """Service for sales statistics."""

    def __init__(self, repository: StatsRepository):
        self.repository = repository

    async def sales_by_day(self) -> list[DailySales]:
        return await self.repository.sales_by_day()

    async def client_stats(self) -> ClientStats:
        """
        Find the leading clients.

        Each ranking is None when no client has bought anything yet. Ties are
        resolved by whichever row the database returns first.
        """
        top_volume, top_average, top_frequency = await asyncio.gather(
            self.repository.top_volume_client(),
            self.repository.top_average_client(),
            self.repository.top_frequency_client(),
        )
        if top_volume is None:
            logger.info("No sales recorded yet, client rankings are empty")
        return ClientStats(
            top_volume_client=top_volume,
            top_average_client=top_average,
            top_frequency_client=top_frequency,
        )

    async def general(self) -> GeneralStats:
        return await self.repository.general()
