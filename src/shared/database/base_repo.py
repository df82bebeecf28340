import abc
from typing import Generic, TypeVar, Optional

from sqlalchemy import Executable

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database, storage_errors


TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    async def find_one(self, statement: Executable) -> Optional[TModel]:
        with storage_errors():
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entity = result.scalars().first()
        if entity is None:
            return None
        return self.mapper.to_model(entity)

    async def find_all(self, statement: Executable) -> list[TModel]:
        with storage_errors():
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entities = list(result.scalars().all())
        return [self.mapper.to_model(entity) for entity in entities]

    async def execute_write(self, statement: Executable) -> int:
        """
        Execute a single bulk write statement (UPDATE/DELETE) in its own transaction.

        Args:
            statement: SQLAlchemy DML statement

        Returns:
            Number of rows affected by the statement
        """
        with storage_errors():
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                await session.commit()
        return result.rowcount
