"""Client service - calls to the /client endpoints"""

import logging

from ...gateway import ApiGateway
from ..common import create_payload, parse_item, parse_list, update_payload
from .schemas import Client, ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


class ClientService:
    """Client for client operations"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def list_clients(self) -> list[Client]:
        """Get all clients"""
        return parse_list(Client, await self.gateway.get("/client"))

    async def get_client(self, client_id: str) -> Client:
        """Get a specific client"""
        return parse_item(Client, await self.gateway.get(f"/client/{client_id}"))

    async def create_client(self, data: ClientCreate) -> Client:
        """Create a new client"""
        logger.info(f"📥 Creating client {data.email}")
        return parse_item(Client, await self.gateway.post("/client", create_payload(data)))

    async def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        """Update a client with the fields that were set"""
        return parse_item(
            Client, await self.gateway.put(f"/client/{client_id}", update_payload(data))
        )

    async def delete_client(self, client_id: str) -> None:
        """Delete a client"""
        await self.gateway.delete(f"/client/{client_id}")
        logger.info(f"🗑️ Deleted client {client_id}")
