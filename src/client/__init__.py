"""Python client for the Maple Clients API."""
from src.client.maple_client import MapleClient
from src.client.schemas import (
    ClientResponse,
    CreateClientRequest,
    ErrorResponse,
    UpdateClientRequest,
)

__all__ = [
    "MapleClient",
    "ClientResponse",
    "CreateClientRequest",
    "ErrorResponse",
    "UpdateClientRequest",
]
