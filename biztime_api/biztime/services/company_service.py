"""Company service: list / get / create / update / delete companies."""
from typing import Any, Dict, List, Optional

from fastapi import status
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from biztime.errors import AppError, NotFoundError
from biztime.logging_config import get_logger
from biztime.models import Company, Invoice
from biztime.utils.slug import slugify

logger = get_logger(__name__)


async def list_companies(db: AsyncSession) -> List[Company]:
    """All companies with their industries loaded (no paging, no filters)."""
    q = select(Company).options(selectinload(Company.industries)).order_by(Company.code)
    r = await db.execute(q)
    return list(r.scalars().all())


async def get_company(db: AsyncSession, code: str) -> Dict[str, Any]:
    """
    Company by code (case-insensitive input), with industries and invoice ids.
    Raises NotFoundError when absent.
    """
    code = code.lower()
    q = select(Company).options(selectinload(Company.industries)).where(Company.code == code)
    r = await db.execute(q)
    company = r.scalar_one_or_none()
    if company is None:
        raise NotFoundError(f"Can't find company with code of {code}")

    inv = await db.execute(select(Invoice.id).where(Invoice.comp_code == code).order_by(Invoice.id))
    return {
        "code": company.code,
        "name": company.name,
        "description": company.description,
        "industries": [{"code": i.code, "industry": i.industry} for i in company.industries],
        "invoices": list(inv.scalars().all()),
    }


async def create_company(db: AsyncSession, name: str, description: Optional[str]) -> Company:
    """Insert a company whose code is the slug of its name. Duplicates fail in the DB."""
    code = slugify(name)
    if not code:
        raise AppError(f"Can't derive a company code from name {name!r}", status.HTTP_400_BAD_REQUEST)
    company = Company(code=code, name=name, description=description)
    db.add(company)
    await db.flush()
    logger.info("company_created", code=code)
    return company


async def update_company(
    db: AsyncSession,
    code: str,
    name: Optional[str],
    description: Optional[str],
) -> Dict[str, Any]:
    """Overwrite name and description. Raises NotFoundError when no row matches."""
    q = (
        update(Company)
        .where(Company.code == code)
        .values(name=name, description=description)
        .returning(Company.code, Company.name, Company.description)
        .execution_options(synchronize_session=False)
    )
    r = await db.execute(q)
    row = r.mappings().one_or_none()
    if row is None:
        raise NotFoundError(f"Can't update company with code of {code}")
    return dict(row)


async def delete_company(db: AsyncSession, code: str) -> None:
    """Delete by code. Missing companies are not an error."""
    r = await db.execute(delete(Company).where(Company.code == code))
    logger.info("company_deleted", code=code, rows=r.rowcount)
