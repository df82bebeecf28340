"""Maple HTTP Client for consuming the Maple Clients API."""
from uuid import UUID
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateClientRequest,
    UpdateClientRequest,
    ClientResponse,
)

CLIENTS_PATH = "/clients"


class MapleClient:
    """HTTP client for interacting with the Maple Clients API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the Maple client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request

        Returns:
            Created client response, including the generated id and resolved demonym

        Raises:
            httpx.HTTPStatusError: If the request fails (400 invalid, 409 duplicate email)
        """
        response: Response = await self.client.post(
            CLIENTS_PATH,
            json=request.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return ClientResponse.model_validate(response.json())

    async def list_clients(self) -> list[ClientResponse]:
        """
        List all clients.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get(CLIENTS_PATH)
        response.raise_for_status()
        return [ClientResponse.model_validate(item) for item in response.json()]

    async def list_clients_by_country(self, country: str) -> list[ClientResponse]:
        """
        List clients registered with a country code (exact match).

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get(f"{CLIENTS_PATH}/country/{country}")
        response.raise_for_status()
        return [ClientResponse.model_validate(item) for item in response.json()]

    async def get_client(self, client_id: UUID) -> ClientResponse:
        """
        Get a client by ID.

        Args:
            client_id: UUID of the client

        Returns:
            Client response

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"{CLIENTS_PATH}/{client_id}")
        response.raise_for_status()
        return ClientResponse.model_validate(response.json())

    async def update_client(self, client_id: UUID, request: UpdateClientRequest) -> ClientResponse:
        """
        Update the contact details of a client.

        Args:
            client_id: UUID of the client
            request: New email, address, phone and country

        Returns:
            Updated client response

        Raises:
            httpx.HTTPStatusError: If the request fails (400, 404 or 409)
        """
        response: Response = await self.client.put(
            f"{CLIENTS_PATH}/{client_id}",
            json=request.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return ClientResponse.model_validate(response.json())

    async def delete_client(self, client_id: UUID) -> None:
        """
        Delete a client by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"{CLIENTS_PATH}/{client_id}")
        response.raise_for_status()
