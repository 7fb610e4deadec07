import abc
from typing import Any, Generic, TypeVar, Optional

from sqlalchemy import Executable, Row
from sqlalchemy.exc import IntegrityError

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database
from src.shared.database.errors import classify_integrity_error


TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    async def find_one(self, statement: Executable) -> Optional[TModel]:
        async with self.db.session_maker() as session:
            result = await session.execute(statement)
            entity = result.scalar_one_or_none()
            if entity is None:
                return None
            return self.mapper.to_model(entity)

    async def find_all(self, statement: Executable) -> list[TModel]:
        async with self.db.session_maker() as session:
            result = await session.execute(statement)
            entities = list(result.scalars().all())
            return [self.mapper.to_model(entity) for entity in entities]

    async def fetch_rows(self, statement: Executable) -> list[Row[Any]]:
        """Execute a query and return its raw result rows."""
        async with self.db.session_maker() as session:
            result = await session.execute(statement)
            return list(result.all())

    async def scalar(self, statement: Executable) -> Any:
        async with self.db.session_maker() as session:
            result = await session.execute(statement)
            return result.scalar_one()

    async def add(self, model_instance: TModel) -> TModel:
        """
        Insert a model and return it as re-read from the database.

        Server-side defaults (ids, timestamps) are populated on the returned model.

        Raises:
            ConstraintViolation: If the insert violates an integrity constraint
        """
        entity = self.mapper.to_entity(model_instance)
        async with self.db.session_maker() as session:
            session.add(entity)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise classify_integrity_error(e) from e
            await session.refresh(entity)
            return self.mapper.to_model(entity)

    async def execute(self, statement: Executable) -> int:
        """
        Execute a write statement in its own transaction.

        Returns:
            Number of rows affected

        Raises:
            ConstraintViolation: If the statement violates an integrity constraint
        """
        async with self.db.session_maker() as session:
            try:
                result = await session.execute(statement)
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise classify_integrity_error(e) from e
            return result.rowcount
