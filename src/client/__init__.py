"""Python client for the Toy Store API."""
from src.client.toystore_client import ToyStoreClient
from src.client.schemas import (
    ClientRequest,
    ClientResponse,
    ClientListResponse,
    ClientStatsResponse,
    DailySalesResponse,
    GeneralStatsResponse,
)

__all__ = [
    "ToyStoreClient",
    "ClientRequest",
    "ClientResponse",
    "ClientListResponse",
    "ClientStatsResponse",
    "DailySalesResponse",
    "GeneralStatsResponse",
]
