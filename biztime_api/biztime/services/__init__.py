"""Business logic services."""
from biztime.services import company_service, industry_service, invoice_service

__all__ = [
    "company_service",
    "industry_service",
    "invoice_service",
]
