import abc
from typing import Generic, TypeVar, Optional

from sqlalchemy import Executable
from sqlalchemy.exc import SQLAlchemyError

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database
from src.shared.exceptions import StorageUnavailable


TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    async def find_one(self, statement: Executable) -> Optional[TModel]:
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entity = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageUnavailable("find_one") from e
        if entity is None:
            return None
        return self.mapper.to_model(entity)

    async def find_all(self, statement: Executable) -> list[TModel]:
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entities = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StorageUnavailable("find_all") from e
        return [self.mapper.to_model(entity) for entity in entities]

    async def insert(self, model_instance: TModel) -> TModel:
        """
        Insert a model and read it back with every storage-assigned column populated.

        Args:
            model_instance: Domain model without storage-assigned values

        Returns:
            The persisted model as stored by the engine
        """
        entity = self.mapper.to_entity(model_instance)
        try:
            async with self.db.session_maker() as session:
                async with session.begin():
                    session.add(entity)
                    await session.flush()
                    await session.refresh(entity)
        except SQLAlchemyError as e:
            raise StorageUnavailable("insert") from e
        return self.mapper.to_model(entity)

    async def modify_returning(self, statement: Executable) -> Optional[TModel]:
        """
        Run an UPDATE ... RETURNING statement in its own transaction.

        Returns:
            The updated model, or None when no row matched
        """
        try:
            async with self.db.session_maker() as session:
                async with session.begin():
                    result = await session.execute(statement)
                    entity = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageUnavailable("modify_returning") from e
        if entity is None:
            return None
        return self.mapper.to_model(entity)

    async def execute_counting(self, statement: Executable) -> int:
        """Run a write statement in its own transaction and return the affected row count."""
        try:
            async with self.db.session_maker() as session:
                async with session.begin():
                    result = await session.execute(statement)
                    return result.rowcount
        except SQLAlchemyError as e:
            raise StorageUnavailable("execute_counting") from e
