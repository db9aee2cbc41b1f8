"""Industry and company-industry association schemas."""
from typing import List

from pydantic import BaseModel, Field


class IndustryCreate(BaseModel):
    """Body for POST /industries."""

    code: str = Field(..., min_length=1, max_length=255)
    industry: str = Field(..., min_length=1, max_length=255)


class IndustryOut(BaseModel):
    code: str
    industry: str

    model_config = {"from_attributes": True}


class IndustryWithCompanies(IndustryOut):
    """One industry in GET /industries, with associated company codes."""

    companies: List[str] = Field(default_factory=list)


class IndustryCompanyOut(BaseModel):
    """Company listed under an industry."""

    code: str
    name: str

    model_config = {"from_attributes": True}


class AssociationCreate(BaseModel):
    """Body for POST /industries/{code}/companies."""

    comp_code: str = Field(..., min_length=1, max_length=255)


class AssociationOut(BaseModel):
    comp_code: str
    industry_code: str


class IndustryListResponse(BaseModel):
    industries: List[IndustryWithCompanies]


class IndustryResponse(BaseModel):
    industry: IndustryOut


class IndustryCompaniesResponse(BaseModel):
    companies: List[IndustryCompanyOut]


class AssociationResponse(BaseModel):
    company_industry: AssociationOut
