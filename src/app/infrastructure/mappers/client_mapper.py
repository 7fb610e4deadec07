from typing import Any

from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Client, parse_date
from src.app.infrastructure.entities.client_entity import ClientEntity


class ClientMapper(BaseEntityMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain model and ClientEntity."""

    @staticmethod
    def to_entity(model_instance: Client) -> ClientEntity:
        """Convert a Client (domain model) to ClientEntity (database entity)."""
        return ClientEntity(
            id=model_instance.id,
            name=model_instance.name,
            email=model_instance.email,
            birth_date=parse_date(model_instance.birth_date),
        )

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (database entity) to Client (domain model)."""
        return Client(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            birth_date=entity.birth_date.isoformat(),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def to_values(model_instance: Client) -> dict[str, Any]:
        """Columns a full-record update rewrites."""
        return {
            "name": model_instance.name,
            "email": model_instance.email,
            "birth_date": parse_date(model_instance.birth_date),
        }
