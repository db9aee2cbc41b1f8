"""API routers."""
from biztime.routers.health_router import router as health_router
from biztime.routers.companies_router import router as companies_router
from biztime.routers.invoices_router import router as invoices_router
from biztime.routers.industries_router import router as industries_router

__all__ = [
    "health_router",
    "companies_router",
    "invoices_router",
    "industries_router",
]
