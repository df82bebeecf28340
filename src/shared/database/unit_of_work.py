from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database, storage_errors
from src.shared.database.entity_mapper import EntityMapper


class UnitOfWork:
    """
    Groups writes into a single transaction.

    Usage:
        async with unit_of_work:
            unit_of_work.add(model)

    Leaving the block commits; an exception inside the block rolls back.
    """

    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.session.close()

    def _map_to_entity(self, model_instance: Any):
        return self.entity_mapper.map_to_entity(model_instance)

    def add(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        self.session.add(entity)

    async def commit(self):
        try:
            with storage_errors():
                await self.session.commit()
        except Exception:
            await self.rollback()
            raise

    async def rollback(self):
        await self.session.rollback()
