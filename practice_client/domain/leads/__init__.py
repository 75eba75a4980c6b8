"""Leads domain - prospective clients before conversion"""

from .schemas import Lead, LeadCreate, LeadUpdate
from .service import LeadService

__all__ = ["Lead", "LeadCreate", "LeadUpdate", "LeadService"]
