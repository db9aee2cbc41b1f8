"""SQLAlchemy models."""
from biztime.models.company import Company
from biztime.models.invoice import Invoice
from biztime.models.industry import Industry, company_industries

__all__ = [
    "Company",
    "Invoice",
    "Industry",
    "company_industries",
]
