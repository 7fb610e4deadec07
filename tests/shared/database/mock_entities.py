from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Base


class UserModel(BaseModel):
    id: Optional[int] = None
    name: str
    email: str


class UserEntity(Base):
    __tablename__ = "test_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)


class UserMapper(BaseEntityMapper[UserModel, UserEntity]):
    """Example mapper that converts between UserModel and UserEntity."""

    @staticmethod
    def to_entity(model_instance: UserModel) -> UserEntity:
        """Convert a UserModel (domain model) to UserEntity (database entity)."""
        return UserEntity(
            id=model_instance.id,
            name=model_instance.name,
            email=model_instance.email,
        )

    @staticmethod
    def to_model(entity: UserEntity) -> UserModel:
        """Convert a UserEntity (database entity) to UserModel (domain model)."""
        return UserModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
        )

    @staticmethod
    def to_values(model_instance: UserModel) -> dict[str, Any]:
        return {"name": model_instance.name, "email": model_instance.email}
