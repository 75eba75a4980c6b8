"""Clients domain - customers of the practice"""

from .schemas import Client, ClientCreate, ClientUpdate
from .service import ClientService

__all__ = ["Client", "ClientCreate", "ClientUpdate", "ClientService"]
