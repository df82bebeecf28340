from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.client_service import ClientService
from src.client.schemas import CreateClientRequest, UpdateClientRequest, ClientResponse, ErrorResponse
from src.app.api.mappers import to_client_response
from src.shared.exceptions import EntityNotFound, ConflictingEntityFound, StorageError
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _storage_failure(action: str, error: StorageError) -> HTTPException:
    logger.error(f"Storage failure while {action}: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Error {action}: {error}",
    )


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED, responses=ERROR_RESPONSES)
@inject
async def create_client(
    request: CreateClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """
    Create a new client.

    The demonym is populated from the RestCountries API when available;
    an unavailable API never blocks the creation.
    """
    try:
        client = await service.create_client(request)
    except ConflictingEntityFound as e:
        logger.error(f"Failed to create client: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except StorageError as e:
        raise _storage_failure("creating client", e)
    return to_client_response(client)


@router.get("", response_model=list[ClientResponse], responses=ERROR_RESPONSES)
@inject
async def list_clients(
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """List all clients."""
    try:
        clients = await service.list_clients()
    except StorageError as e:
        raise _storage_failure("retrieving clients", e)
    return [to_client_response(client) for client in clients]


@router.get("/country/{country}", response_model=list[ClientResponse], responses=ERROR_RESPONSES)
@inject
async def list_clients_by_country(
    country: str,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """List clients of a country (exact code match). Unknown codes yield an empty list."""
    try:
        clients = await service.list_clients_by_country(country)
    except StorageError as e:
        raise _storage_failure("retrieving clients by country", e)
    return [to_client_response(client) for client in clients]


@router.get("/{client_id}", response_model=ClientResponse, responses=ERROR_RESPONSES)
@inject
async def get_client(
    client_id: UUID,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Get a client by ID."""
    try:
        client = await service.get_client(client_id)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError as e:
        raise _storage_failure("retrieving client", e)
    return to_client_response(client)


@router.put("/{client_id}", response_model=ClientResponse, responses=ERROR_RESPONSES)
@inject
async def update_client(
    client_id: UUID,
    request: UpdateClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """
    Update a client's email, address, phone and country.

    Name fields cannot be changed. The demonym follows the new country
    when the lookup succeeds and is kept otherwise.
    """
    try:
        client = await service.update_client(client_id, request)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictingEntityFound as e:
        logger.error(f"Failed to update client: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except StorageError as e:
        raise _storage_failure("updating client", e)
    return to_client_response(client)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
@inject
async def delete_client(
    client_id: UUID,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> Response:
    """Delete a client by ID."""
    try:
        deleted = await service.delete_client(client_id)
    except StorageError as e:
        raise _storage_failure("deleting client", e)
    if not deleted:
        logger.error(f"Client not found for deletion: {client_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Client with ID {client_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
