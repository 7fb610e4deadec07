"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.sale_mapper import SaleMapper

__all__ = [
    "ClientMapper",
    "SaleMapper",
]
