"""Invoice request/response schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from biztime.schemas.company import CompanyOut


class InvoiceCreate(BaseModel):
    """Body for POST /invoices."""

    comp_code: str = Field(..., min_length=1, max_length=255)
    amt: float


class InvoiceUpdate(BaseModel):
    """Body for PUT /invoices/{id}. A missing or null `paid` means unpaid."""

    amt: float
    paid: Optional[bool] = False


class InvoiceSummary(BaseModel):
    """One invoice in GET /invoices."""

    id: int
    comp_code: str

    model_config = {"from_attributes": True}


class InvoiceOut(BaseModel):
    """Invoice row as returned by create/update."""

    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None

    model_config = {"from_attributes": True}


class InvoiceDetail(BaseModel):
    """GET /invoices/{id}: invoice fields with the owning company nested."""

    id: int
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None
    company: CompanyOut

    model_config = {"from_attributes": True}


class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
