"""Lead service - calls to the /lead endpoints"""

import logging

from ...gateway import ApiGateway
from ..common import create_payload, parse_item, parse_list, update_payload
from .schemas import Lead, LeadCreate, LeadUpdate

logger = logging.getLogger(__name__)


class LeadService:
    """Client for lead operations"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def list_leads(self) -> list[Lead]:
        """Get all leads"""
        return parse_list(Lead, await self.gateway.get("/lead"))

    async def get_lead(self, lead_id: str) -> Lead:
        """Get a specific lead"""
        return parse_item(Lead, await self.gateway.get(f"/lead/{lead_id}"))

    async def create_lead(self, data: LeadCreate) -> Lead:
        """Create a new lead"""
        logger.info(f"📥 Creating lead {data.first_name} {data.last_name}")
        return parse_item(Lead, await self.gateway.post("/lead", create_payload(data)))

    async def update_lead(self, lead_id: str, data: LeadUpdate) -> Lead:
        """Update a lead with the fields that were set"""
        return parse_item(Lead, await self.gateway.put(f"/lead/{lead_id}", update_payload(data)))

    async def delete_lead(self, lead_id: str) -> None:
        """Delete a lead"""
        await self.gateway.delete(f"/lead/{lead_id}")
        logger.info(f"🗑️ Deleted lead {lead_id}")
