"""Services domain - the catalog of offered services"""

from .schemas import Service, ServiceCreate, ServiceUpdate
from .service import ServiceCatalog

__all__ = ["Service", "ServiceCreate", "ServiceUpdate", "ServiceCatalog"]
