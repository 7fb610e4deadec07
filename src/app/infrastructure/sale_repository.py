from src.app.core.domain.models import Sale
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.sale_entity import SaleEntity
from src.app.infrastructure.mappers.sale_mapper import SaleMapper


class SaleRepository(BaseRepository[SaleEntity, Sale]):
    """Repository for Sale operations."""

    def __init__(self, db: Database, mapper: SaleMapper):
        super().__init__(db, mapper)

    async def create(self, sale: Sale) -> Sale:
        """
        Insert a sale.

        Raises:
            ConstraintViolation: If the client does not exist (kind FOREIGN_KEY)
        """
        return await self.add(sale)

