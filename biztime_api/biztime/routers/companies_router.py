"""Companies API: list / get / create / update / delete."""
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.db import get_db
from biztime.schemas.common import StatusResponse
from biztime.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyOut,
    CompanyResponse,
    CompanySummary,
    CompanyUpdate,
)
from biztime.services import company_service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=CompanyListResponse)
@router.get("/", response_model=CompanyListResponse, include_in_schema=False)
async def get_companies(db: AsyncSession = Depends(get_db)) -> CompanyListResponse:
    """All companies with their industries."""
    companies = await company_service.list_companies(db)
    return CompanyListResponse(companies=[CompanySummary.model_validate(c) for c in companies])


@router.get("/{code}", response_model=CompanyDetailResponse)
async def get_company(code: str, db: AsyncSession = Depends(get_db)) -> CompanyDetailResponse:
    """One company with its industries and invoice ids; 404 if unknown."""
    company = await company_service.get_company(db, code)
    return CompanyDetailResponse(company=CompanyDetail.model_validate(company))


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def post_company(
    payload: CompanyCreate,
    db: AsyncSession = Depends(get_db),
) -> CompanyResponse:
    """Create a company; its code is the slug of the name."""
    company = await company_service.create_company(db, name=payload.name, description=payload.description)
    return CompanyResponse(company=CompanyOut.model_validate(company))


@router.put("/{code}", response_model=CompanyResponse)
async def put_company(
    code: str,
    payload: Optional[CompanyUpdate] = None,
    db: AsyncSession = Depends(get_db),
) -> CompanyResponse:
    """Update name and description; 404 if unknown."""
    payload = payload or CompanyUpdate()
    company = await company_service.update_company(
        db,
        code=code,
        name=payload.name,
        description=payload.description,
    )
    return CompanyResponse(company=CompanyOut.model_validate(company))


@router.delete("/{code}", response_model=StatusResponse)
async def delete_company(code: str, db: AsyncSession = Depends(get_db)) -> StatusResponse:
    """Delete a company. Always reports deleted, even when nothing matched."""
    await company_service.delete_company(db, code)
    return StatusResponse(status="deleted")
