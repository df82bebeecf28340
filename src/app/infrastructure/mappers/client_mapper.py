from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Client
from src.app.infrastructure.entities.client_entity import ClientEntity


class ClientMapper(BaseEntityMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain model and ClientEntity."""

    @staticmethod
    def to_entity(model_instance: Client) -> ClientEntity:
        """Convert a Client (domain model) to ClientEntity (database entity)."""
        return ClientEntity(
            id=model_instance.id,
            first_name=model_instance.first_name,
            middle_name=model_instance.middle_name,
            last_name=model_instance.last_name,
            second_last_name=model_instance.second_last_name,
            email=str(model_instance.email),
            address=model_instance.address,
            phone=model_instance.phone,
            country=model_instance.country,
            demonym=model_instance.demonym,
        )

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (database entity) to Client (domain model)."""
        return Client(
            id=entity.id,
            first_name=entity.first_name,
            middle_name=entity.middle_name,
            last_name=entity.last_name,
            second_last_name=entity.second_last_name,
            email=entity.email,
            address=entity.address,
            phone=entity.phone,
            country=entity.country,
            demonym=entity.demonym,
        )
