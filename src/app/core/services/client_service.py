import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from src.app.core.domain.models import Client
from src.app.core.services.demonym import DemonymResolver
from src.shared.database.unit_of_work import UnitOfWork
from src.client.schemas import CreateClientRequest, UpdateClientRequest

from src.app.infrastructure.client_repository import ClientRepository


from src.shared.exceptions import EntityNotFound, ConflictingEntityFound

logger = logging.getLogger(__name__)


class ClientService:
    """Service for handling Client business logic."""

    def __init__(
        self,
        repository: ClientRepository,
        unit_of_work: UnitOfWork,
        demonym_resolver: DemonymResolver,
    ):
        self.repository = repository
        self.unit_of_work = unit_of_work
        self.demonym_resolver = demonym_resolver

    async def create_client(self, request: CreateClientRequest) -> Client:
        """
        Create a new client.

        The email must not be used by any other client (case-insensitive).
        The demonym is resolved from the country on a best-effort basis.
        """
        await self._ensure_email_available(request.email)

        client = Client(
            first_name=request.first_name,
            middle_name=request.middle_name,
            last_name=request.last_name,
            second_last_name=request.second_last_name,
            email=request.email,
            address=request.address,
            phone=request.phone,
            country=request.country,
        )
        client.enrich(await self.demonym_resolver.resolve(client.country))

        # The unique constraint on email still guards concurrent creates
        try:
            async with self.unit_of_work:
                self.unit_of_work.add(client)
        except IntegrityError as e:
            raise ConflictingEntityFound("Client", "email", client.email) from e

        logger.info("Created client %s (country=%s, demonym=%s)", client.id, client.country, client.demonym)
        return client

    async def get_client(self, client_id: UUID) -> Client:
        """Get a client by ID."""
        client = await self.repository.get_by_id(client_id)
        if not client:
            raise EntityNotFound("Client", client_id)
        return client

    async def list_clients(self) -> list[Client]:
        """List all clients."""
        return await self.repository.list_all()

    async def list_clients_by_country(self, country: str) -> list[Client]:
        """List clients registered with the given country code."""
        return await self.repository.list_by_country(country)

    async def update_client(self, client_id: UUID, request: UpdateClientRequest) -> Client:
        """
        Update the contact details of an existing client.

        Names and identity are preserved. The demonym is refreshed from the
        country and kept at its previous value when the lookup fails.
        """
        client = await self.get_client(client_id)
        await self._ensure_email_available(request.email, exclude_id=client_id)

        client.update_contact(
            email=request.email,
            address=request.address,
            phone=request.phone,
            country=request.country,
        )
        client.enrich(await self.demonym_resolver.resolve(client.country))

        # The row may have been deleted while the lookup was in flight
        try:
            updated = await self.repository.update(client)
        except IntegrityError as e:
            raise ConflictingEntityFound("Client", "email", client.email) from e
        if not updated:
            raise EntityNotFound("Client", client_id)

        logger.info("Updated client %s", client.id)
        return client

    async def delete_client(self, client_id: UUID) -> bool:
        """Delete a client. Returns False if no client had this ID."""
        deleted = await self.repository.delete_by_id(client_id)
        if deleted:
            logger.info("Deleted client %s", client_id)
        return deleted

    async def _ensure_email_available(self, email: str, exclude_id: UUID | None = None) -> None:
        existing = await self.repository.get_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise ConflictingEntityFound("Client", "email", email.lower())
