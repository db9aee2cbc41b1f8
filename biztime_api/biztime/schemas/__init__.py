"""Pydantic request/response schemas."""
from biztime.schemas.common import ErrorResponse, StatusResponse
from biztime.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyOut,
    CompanyDetail,
    CompanyListResponse,
    CompanyResponse,
    CompanyDetailResponse,
)
from biztime.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceOut,
    InvoiceDetail,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceDetailResponse,
)
from biztime.schemas.industry import (
    IndustryCreate,
    IndustryOut,
    AssociationCreate,
    AssociationOut,
    IndustryListResponse,
    IndustryResponse,
    IndustryCompaniesResponse,
    AssociationResponse,
)

__all__ = [
    "ErrorResponse",
    "StatusResponse",
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyOut",
    "CompanyDetail",
    "CompanyListResponse",
    "CompanyResponse",
    "CompanyDetailResponse",
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceOut",
    "InvoiceDetail",
    "InvoiceListResponse",
    "InvoiceResponse",
    "InvoiceDetailResponse",
    "IndustryCreate",
    "IndustryOut",
    "AssociationCreate",
    "AssociationOut",
    "IndustryListResponse",
    "IndustryResponse",
    "IndustryCompaniesResponse",
    "AssociationResponse",
]
