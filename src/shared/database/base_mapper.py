import abc
from typing import Any, Generic, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):
    """Converts between a domain model and its SQLAlchemy entity."""

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        pass

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        pass

    @staticmethod
    @abc.abstractmethod
    def to_values(model_instance: TModel) -> dict[str, Any]:
        """Column values written by an UPDATE statement."""
        pass
