from typing import Optional, Protocol

from sqlalchemy import select, update, delete, func, ColumnElement

from src.app.core.domain.models import Client, ClientFilter, ClientSaleRow, Pagination
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.sale_entity import SaleEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper


class ClientRepositoryProtocol(Protocol):
    """Operations the client service needs from a client store."""

    async def create(self, client: Client) -> Client: ...

    async def find_page(self, filters: ClientFilter, pagination: Pagination) -> list[ClientSaleRow]: ...

    async def count_all(self, filters: ClientFilter) -> int: ...

    async def get_by_id(self, client_id: int) -> Optional[Client]: ...

    async def update(self, client_id: int, client: Client) -> Optional[Client]: ...

    async def delete(self, client_id: int) -> int: ...


def _filter_conditions(filters: ClientFilter) -> list[ColumnElement[bool]]:
    conditions = []
    if filters.name:
        conditions.append(ClientEntity.name.icontains(filters.name, autoescape=True))
    if filters.email:
        conditions.append(ClientEntity.email.icontains(filters.email, autoescape=True))
    return conditions


class ClientRepository(BaseRepository[ClientEntity, Client]):
    """Repository for Client operations."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    async def create(self, client: Client) -> Client:
        """
        Insert a client and return the stored row.

        Raises:
            ConstraintViolation: If the email is already taken (kind UNIQUE)
        """
        return await self.add(client)

    async def find_page(self, filters: ClientFilter, pagination: Pagination) -> list[ClientSaleRow]:
        """
        Fetch one page of client/sale join rows.

        Clients are LEFT JOINed with their sales, filtered, ordered by name and
        paginated. A client with N sales yields N rows; a client without sales
        yields one row whose sale fields are None. Pagination applies to join
        rows, not to distinct clients.

        Args:
            filters: Name/email substring filters
            pagination: Page and limit

        Returns:
            Join rows in name order
        """
        stmt = (
            select(ClientEntity, SaleEntity.sale_date, SaleEntity.value)
            .outerjoin(SaleEntity, SaleEntity.client_id == ClientEntity.id)
            .where(*_filter_conditions(filters))
            .order_by(ClientEntity.name.asc())
            .limit(pagination.limit)
            .offset(pagination.offset)
        )
        rows = await self.fetch_rows(stmt)

        return [
            ClientSaleRow(
                client=self.mapper.to_model(entity),
                sale_date=sale_date.isoformat() if sale_date is not None else None,
                value=value,
            )
            for entity, sale_date, value in rows
        ]

    async def count_all(self, filters: ClientFilter) -> int:
        """Count clients matching the filters, ignoring pagination."""
        stmt = select(func.count()).select_from(ClientEntity).where(*_filter_conditions(filters))
        return await self.scalar(stmt)

    async def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get a client by ID."""
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id)
        )

    async def get_by_email(self, email: str) -> Optional[Client]:
        """Get a client by email."""
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.email == email)
        )

    async def update(self, client_id: int, client: Client) -> Optional[Client]:
        """
        Rewrite name, email and birth date and touch updated_at.

        Returns:
            The refreshed client, or None if no client has this ID

        Raises:
            ConstraintViolation: If the new email belongs to another client
        """
        stmt = (
            update(ClientEntity)
            .where(ClientEntity.id == client_id)
            .values(**self.mapper.to_values(client), updated_at=func.now())
        )
        if await self.execute(stmt) == 0:
            return None
        return await self.get_by_id(client_id)

    async def delete(self, client_id: int) -> int:
        """
        Delete a client; its sales go with it.

        Returns:
            Number of clients removed (0 or 1)
        """
        return await self.execute(delete(ClientEntity).where(ClientEntity.id == client_id))
