import asyncio
import logging
from typing import Any

from src.app.core.domain.models import (
    Client,
    ClientFilter,
    ClientListData,
    ClientListEnvelope,
    ClientListMeta,
    ClientSaleRow,
    ClientSales,
    Pagination,
    SaleProjection,
)
from src.app.infrastructure.client_repository import ClientRepositoryProtocol
from src.client.schemas import ClientRequest
from src.shared.database.errors import ConstraintKind, ConstraintViolation
from src.shared.exceptions import EntityNotFound, ConflictingEntityFound, EntityValidationFailed

logger = logging.getLogger(__name__)


def group_client_rows(rows: list[ClientSaleRow]) -> list[ClientSales]:
    """
    Fold join rows back into one entry per client.

    Clients keep the order of their first row; sales keep row order. Rows
    without a sale date only register the client.
    """
    grouped: dict[int | None, ClientSales] = {}
    for row in rows:
        group = grouped.get(row.client.id)
        if group is None:
            group = ClientSales(client=row.client)
            grouped[row.client.id] = group
        if row.sale_date is not None:
            group.sales.append(SaleProjection(sale_date=row.sale_date, value=row.value or 0.0))
    return list(grouped.values())


class ClientService:
    """Service for handling Client business logic."""

    def __init__(
        self,
        repository: ClientRepositoryProtocol,
        default_page: int = 1,
        default_limit: int = 10,
        max_limit: int = 100,
    ):
        """
        Initialize the client service.

        Args:
            repository: Client store
            default_page: Page used when the request has none or an invalid one
            default_limit: Page size used when the request has none or an invalid one
            max_limit: Largest page size a request may ask for
        """
        self.repository = repository
        self.default_page = default_page
        self.default_limit = default_limit
        self.max_limit = max_limit

    @staticmethod
    def _validated(request: ClientRequest, client_id: int | None = None) -> Client:
        client = Client(
            id=client_id,
            name=request.name,
            email=request.email,
            birth_date=request.birth_date,
        )
        validation = client.validate_fields()
        if not validation.is_valid:
            raise EntityValidationFailed("Client", validation.errors)
        return client

    async def create_client(self, request: ClientRequest) -> dict[str, Any]:
        """Create a new client."""
        client = self._validated(request)

        try:
            created = await self.repository.create(client)
        except ConstraintViolation as e:
            if e.kind is ConstraintKind.UNIQUE:
                raise ConflictingEntityFound("Client", "email", request.email) from e
            raise

        logger.info("Created client %s", created.id)
        return created.to_plain()

    async def list_clients(
        self,
        filters: ClientFilter,
        page: Any = None,
        limit: Any = None,
    ) -> ClientListEnvelope:
        """
        List clients with their sales, one page at a time.

        Args:
            filters: Name/email substring filters
            page: Raw 1-based page number; invalid values use the default
            limit: Raw page size; invalid values use the default, large ones are capped

        Returns:
            Envelope with the formatted clients, the total match count and the page number
        """
        pagination = Pagination.parse(
            page,
            limit,
            default_page=self.default_page,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
        )

        # Independent reads
        rows, total = await asyncio.gather(
            self.repository.find_page(filters, pagination),
            self.repository.count_all(filters),
        )

        groups = group_client_rows(rows)
        logger.debug(
            "Listed %d clients from %d rows (page=%d, limit=%d, total=%d)",
            len(groups), len(rows), pagination.page, pagination.limit, total,
        )

        return ClientListEnvelope(
            data=ClientListData(clients=[group.client.to_formatted(group.sales) for group in groups]),
            meta=ClientListMeta(total=total, page=pagination.page),
        )

    async def get_client(self, client_id: int) -> dict[str, Any]:
        """Get a client by ID."""
        client = await self.repository.get_by_id(client_id)
        if not client:
            raise EntityNotFound("Client", client_id)
        return client.to_plain()

    async def update_client(self, client_id: int, request: ClientRequest) -> dict[str, Any]:
        """Replace a client's name, email and birth date."""
        client = self._validated(request, client_id)

        try:
            updated = await self.repository.update(client_id, client)
        except ConstraintViolation as e:
            if e.kind is ConstraintKind.UNIQUE:
                raise ConflictingEntityFound("Client", "email", request.email) from e
            raise

        if updated is None:
            raise EntityNotFound("Client", client_id)

        logger.info("Updated client %s", client_id)
        return updated.to_plain()

    async def delete_client(self, client_id: int) -> None:
        """Delete a client and, through the database, its sales."""
        removed = await self.repository.delete(client_id)
        if not removed:
            raise EntityNotFound("Client", client_id)
        logger.info("Deleted client %s", client_id)
