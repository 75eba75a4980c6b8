"""Service catalog - calls to the /service endpoints"""

import logging

from ...gateway import ApiGateway
from ..common import create_payload, parse_item, parse_list, update_payload
from .schemas import Service, ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)


class ServiceCatalog:
    """Client for service catalog operations"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def list_services(self) -> list[Service]:
        return parse_list(Service, await self.gateway.get("/service"))

    async def get_service(self, service_id: str) -> Service:
        return parse_item(Service, await self.gateway.get(f"/service/{service_id}"))

    async def create_service(self, data: ServiceCreate) -> Service:
        logger.info(f"📥 Creating service '{data.service}'")
        return parse_item(Service, await self.gateway.post("/service", create_payload(data)))

    async def update_service(self, service_id: str, data: ServiceUpdate) -> Service:
        return parse_item(
            Service, await self.gateway.put(f"/service/{service_id}", update_payload(data))
        )

    async def delete_service(self, service_id: str) -> None:
        await self.gateway.delete(f"/service/{service_id}")
        logger.info(f"🗑️ Deleted service {service_id}")
