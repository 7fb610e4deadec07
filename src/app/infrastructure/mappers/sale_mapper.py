from typing import Any

from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Sale
from src.app.infrastructure.entities.sale_entity import SaleEntity


class SaleMapper(BaseEntityMapper[Sale, SaleEntity]):
    """Mapper for converting between Sale domain model and SaleEntity."""

    @staticmethod
    def to_entity(model_instance: Sale) -> SaleEntity:
        return SaleEntity(
            id=model_instance.id,
            client_id=model_instance.client_id,
            value=model_instance.value,
            sale_date=model_instance.sale_date,
        )

    @staticmethod
    def to_model(entity: SaleEntity) -> Sale:
        return Sale(
            id=entity.id,
            client_id=entity.client_id,
            value=entity.value,
            sale_date=entity.sale_date,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_values(model_instance: Sale) -> dict[str, Any]:
        return {
            "client_id": model_instance.client_id,
            "value": model_instance.value,
            "sale_date": model_instance.sale_date,
        }
