"""Toy Store HTTP Client for consuming the Toy Store API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    ClientRequest,
    ClientResponse,
    ClientListResponse,
    ClientStatsResponse,
    DailySalesResponse,
    GeneralStatsResponse,
)


class ToyStoreClient:
    """HTTP client for interacting with the Toy Store API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the Toy Store client.

        Args:
            base_url: Base URL of the Toy Store API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def create_client(self, request: ClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request

        Returns:
            Created client response

        Raises:
            httpx.HTTPStatusError: If the request fails (400 invalid fields, 409 email taken)
        """
        response: Response = await self.client.post(
            "/api/v1/clients/",
            json=request.model_dump(mode="json")
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def list_clients(
        self,
        name: str | None = None,
        email: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> ClientListResponse:
        """
        List clients with their sales.

        Args:
            name: Optional case-insensitive name substring
            email: Optional case-insensitive email substring
            page: 1-based page number (server default when omitted)
            limit: Page size (server default when omitted)

        Returns:
            A page of formatted clients with the total match count

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        params = {
            key: value
            for key, value in {"name": name, "email": email, "page": page, "limit": limit}.items()
            if value is not None
        }
        response: Response = await self.client.get("/api/v1/clients/", params=params)
        response.raise_for_status()
        return ClientListResponse.model_validate(response.json())

    async def get_client(self, client_id: int) -> ClientResponse:
        """
        Get a client by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"/api/v1/clients/{client_id}")
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def update_client(self, client_id: int, request: ClientRequest) -> ClientResponse:
        """
        Replace a client's name, email and birth date.

        Raises:
            httpx.HTTPStatusError: If the request fails (400, 404 or 409)
        """
        response: Response = await self.client.put(
            f"/api/v1/clients/{client_id}",
            json=request.model_dump(mode="json"),
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def delete_client(self, client_id: int) -> None:
        """
        Delete a client and its sales.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"/api/v1/clients/{client_id}")
        response.raise_for_status()

    async def sales_by_day(self) -> list[DailySalesResponse]:
        response: Response = await self.client.get("/api/v1/stats/sales-by-day")
        response.raise_for_status()
        return [DailySalesResponse(**day) for day in response.json()]

    async def client_stats(self) -> ClientStatsResponse:
        response: Response = await self.client.get("/api/v1/stats/client-stats")
        response.raise_for_status()
        return ClientStatsResponse.model_validate(response.json())

    async def general_stats(self) -> GeneralStatsResponse:
        response: Response = await self.client.get("/api/v1/stats/general")
        response.raise_for_status()
        return GeneralStatsResponse.model_validate(response.json())
