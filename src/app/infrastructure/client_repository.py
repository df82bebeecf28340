from uuid import UUID
from typing import Optional
from sqlalchemy import select, delete, func, update

from src.app.core.domain.models import Client
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper


class ClientRepository(BaseRepository[ClientEntity, Client]):
    """Repository for Client operations."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get a client by ID."""
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id)
        )

    async def get_by_email(self, email: str) -> Optional[Client]:
        """Get a client by email, ignoring case."""
        return await self.find_one(
            select(ClientEntity).where(func.lower(ClientEntity.email) == email.lower())
        )

    async def list_all(self) -> list[Client]:
        """List every client. Order is not guaranteed."""
        return await self.find_all(select(ClientEntity))

    async def list_by_country(self, country: str) -> list[Client]:
        """
        List clients whose country code matches exactly.

        The comparison is case-sensitive; "us" does not match "US".
        An empty code returns an empty list without querying.
        """
        if not country:
            return []
        return await self.find_all(
            select(ClientEntity).where(ClientEntity.country == country)
        )

    async def update(self, client: Client) -> bool:
        """
        Overwrite the contact fields and demonym of an existing row.

        Returns False when no row has the client's ID, so a client deleted in
        the meantime is never written back.
        """
        updated = await self.execute_write(
            update(ClientEntity)
            .where(ClientEntity.id == client.id)
            .values(
                email=client.email,
                address=client.address,
                phone=client.phone,
                country=client.country,
                demonym=client.demonym,
            )
        )
        return updated > 0

    async def delete_by_id(self, client_id: UUID) -> bool:
        """Delete a client by ID. Returns True if a row was removed."""
        deleted = await self.execute_write(
            delete(ClientEntity).where(ClientEntity.id == client_id)
        )
        return deleted > 0
