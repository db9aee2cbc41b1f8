"""Industries API: industries and company <-> industry associations."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.db import get_db
from biztime.schemas.common import StatusResponse
from biztime.schemas.industry import (
    AssociationCreate,
    AssociationOut,
    AssociationResponse,
    IndustryCompaniesResponse,
    IndustryCompanyOut,
    IndustryCreate,
    IndustryListResponse,
    IndustryOut,
    IndustryResponse,
    IndustryWithCompanies,
)
from biztime.services import industry_service

router = APIRouter(prefix="/industries", tags=["industries"])


@router.get("", response_model=IndustryListResponse)
@router.get("/", response_model=IndustryListResponse, include_in_schema=False)
async def get_industries(db: AsyncSession = Depends(get_db)) -> IndustryListResponse:
    """All industries with the codes of their companies."""
    rows = await industry_service.list_industries(db)
    return IndustryListResponse(industries=[IndustryWithCompanies(**r) for r in rows])


@router.get("/{code}", response_model=IndustryCompaniesResponse)
async def get_industry_companies(code: str, db: AsyncSession = Depends(get_db)) -> IndustryCompaniesResponse:
    """Companies in an industry; 404 when there are none."""
    rows = await industry_service.get_industry_companies(db, code)
    return IndustryCompaniesResponse(companies=[IndustryCompanyOut(**r) for r in rows])


@router.post("", response_model=IndustryResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=IndustryResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def post_industry(
    payload: IndustryCreate,
    db: AsyncSession = Depends(get_db),
) -> IndustryResponse:
    item = await industry_service.create_industry(db, code=payload.code, industry=payload.industry)
    return IndustryResponse(industry=IndustryOut.model_validate(item))


@router.post(
    "/{code}/companies",
    response_model=AssociationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_industry_company(
    code: str,
    payload: AssociationCreate,
    db: AsyncSession = Depends(get_db),
) -> AssociationResponse:
    """Associate a company (body comp_code) with the industry in the path."""
    row = await industry_service.associate_company(db, code=code, comp_code=payload.comp_code)
    return AssociationResponse(company_industry=AssociationOut(**row))


@router.delete("/{code}", response_model=StatusResponse)
async def delete_industry(code: str, db: AsyncSession = Depends(get_db)) -> StatusResponse:
    """Delete an industry and its associations; 404 if the industry is unknown."""
    await industry_service.delete_industry(db, code)
    return StatusResponse(status="deleted")


@router.delete("/{code}/companies/{comp_code}", response_model=StatusResponse)
async def delete_industry_company(
    code: str,
    comp_code: str,
    db: AsyncSession = Depends(get_db),
) -> StatusResponse:
    """Remove one association; 404 if it did not exist."""
    await industry_service.delete_association(db, code, comp_code)
    return StatusResponse(status="deleted")
