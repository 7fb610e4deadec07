from typing import Optional

from sqlalchemy import select, func

from src.app.core.domain.models import (
    Sale,
    DailySales,
    TopVolumeClient,
    TopAverageClient,
    TopFrequencyClient,
    GeneralStats,
)
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.sale_entity import SaleEntity
from src.app.infrastructure.mappers.sale_mapper import SaleMapper


class StatsRepository(BaseRepository[SaleEntity, Sale]):
    """Read-only aggregate queries over clients and their sales."""

    def __init__(self, db: Database, mapper: SaleMapper):
        super().__init__(db, mapper)

    def _clients_with_sales(self, *aggregates):
        return (
            select(ClientEntity.id, ClientEntity.name, ClientEntity.email, *aggregates)
            .join(SaleEntity, SaleEntity.client_id == ClientEntity.id)
            .group_by(ClientEntity.id, ClientEntity.name, ClientEntity.email)
        )

    async def sales_by_day(self) -> list[DailySales]:
        """Sum and count sales per sale date, oldest first."""
        stmt = (
            select(
                SaleEntity.sale_date,
                func.sum(SaleEntity.value).label("total_sales"),
                func.count(SaleEntity.id).label("total_transactions"),
            )
            .group_by(SaleEntity.sale_date)
            .order_by(SaleEntity.sale_date)
        )
        rows = await self.fetch_rows(stmt)
        return [
            DailySales(
                sale_date=row.sale_date.isoformat(),
                total_sales=float(row.total_sales),
                total_transactions=row.total_transactions,
            )
            for row in rows
        ]

    async def top_volume_client(self) -> Optional[TopVolumeClient]:
        """Client with the largest summed sale value."""
        total_volume = func.sum(SaleEntity.value).label("total_volume")
        stmt = self._clients_with_sales(total_volume).order_by(total_volume.desc()).limit(1)
        rows = await self.fetch_rows(stmt)
        if not rows:
            return None
        row = rows[0]
        return TopVolumeClient(id=row.id, name=row.name, email=row.email, total_volume=float(row.total_volume))

    async def top_average_client(self) -> Optional[TopAverageClient]:
        """Client with the highest average value per sale."""
        average_value = func.avg(SaleEntity.value).label("average_value")
        total_sales = func.count(SaleEntity.id).label("total_sales")
        stmt = self._clients_with_sales(average_value, total_sales).order_by(average_value.desc()).limit(1)
        rows = await self.fetch_rows(stmt)
        if not rows:
            return None
        row = rows[0]
        return TopAverageClient(
            id=row.id,
            name=row.name,
            email=row.email,
            average_value=float(row.average_value),
            total_sales=row.total_sales,
        )

    async def top_frequency_client(self) -> Optional[TopFrequencyClient]:
        """Client who bought on the most distinct days."""
        unique_days = func.count(func.distinct(SaleEntity.sale_date)).label("unique_days")
        total_sales = func.count(SaleEntity.id).label("total_sales")
        stmt = self._clients_with_sales(unique_days, total_sales).order_by(unique_days.desc()).limit(1)
        rows = await self.fetch_rows(stmt)
        if not rows:
            return None
        row = rows[0]
        return TopFrequencyClient(
            id=row.id,
            name=row.name,
            email=row.email,
            unique_days=row.unique_days,
            total_sales=row.total_sales,
        )

    async def general(self) -> GeneralStats:
        """Overall client count, sale count, revenue and average sale value."""
        total_clients = await self.scalar(select(func.count()).select_from(ClientEntity))
        rows = await self.fetch_rows(
            select(
                func.count(SaleEntity.id).label("total_sales"),
                func.sum(SaleEntity.value).label("total_revenue"),
                func.avg(SaleEntity.value).label("average_sale_value"),
            )
        )
        row = rows[0]
        return GeneralStats(
            total_clients=total_clients,
            total_sales=row.total_sales,
            total_revenue=float(row.total_revenue or 0),
            average_sale_value=float(row.average_sale_value or 0),
        )
