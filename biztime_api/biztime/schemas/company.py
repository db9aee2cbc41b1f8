"""Company request/response schemas."""
from typing import List, Optional

from pydantic import BaseModel, Field


class CompanyCreate(BaseModel):
    """Body for POST /companies. The code is derived from the name."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class CompanyUpdate(BaseModel):
    """Body for PUT /companies/{code}."""

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None


class CompanyOut(BaseModel):
    code: str
    name: str
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class CompanyIndustryOut(BaseModel):
    """Industry as attached to a company."""

    code: str
    industry: str

    model_config = {"from_attributes": True}


class CompanySummary(BaseModel):
    """One company in GET /companies."""

    code: str
    name: str
    industries: List[CompanyIndustryOut] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class CompanyDetail(CompanyOut):
    """GET /companies/{code}: company plus industries and invoice ids."""

    industries: List[CompanyIndustryOut] = Field(default_factory=list)
    invoices: List[int] = Field(default_factory=list)


class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail
