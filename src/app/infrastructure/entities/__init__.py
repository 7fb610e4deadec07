"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.sale_entity import SaleEntity

__all__ = [
    "ClientEntity",
    "SaleEntity",
]
