"""Industry service: industries and their company associations."""
from typing import Any, Dict, List

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.errors import NotFoundError
from biztime.logging_config import get_logger
from biztime.models import Company, Industry, company_industries

logger = get_logger(__name__)


async def list_industries(db: AsyncSession) -> List[Dict[str, Any]]:
    """
    Every industry with the codes of its companies. One LEFT JOIN, grouped here;
    an industry without companies gets an empty list.
    """
    q = (
        select(Industry.code, Industry.industry, company_industries.c.comp_code)
        .select_from(Industry)
        .outerjoin(company_industries, Industry.code == company_industries.c.industry_code)
        .order_by(Industry.code)
    )
    r = await db.execute(q)

    industries: Dict[str, Dict[str, Any]] = {}
    for code, name, comp_code in r.all():
        entry = industries.setdefault(code, {"code": code, "industry": name, "companies": []})
        if comp_code is not None:
            entry["companies"].append(comp_code)
    return list(industries.values())


async def get_industry_companies(db: AsyncSession, code: str) -> List[Dict[str, Any]]:
    """
    Companies in the given industry. An empty result raises NotFoundError, so an
    industry with no companies looks the same as an unknown code.
    """
    q = (
        select(Company.code, Company.name)
        .join(company_industries, Company.code == company_industries.c.comp_code)
        .where(company_industries.c.industry_code == code)
        .order_by(Company.code)
    )
    r = await db.execute(q)
    companies = [dict(row) for row in r.mappings().all()]
    if not companies:
        raise NotFoundError(f"Can't find companies with industry code of {code}")
    return companies


async def create_industry(db: AsyncSession, code: str, industry: str) -> Industry:
    item = Industry(code=code, industry=industry)
    db.add(item)
    await db.flush()
    logger.info("industry_created", code=code)
    return item


async def associate_company(db: AsyncSession, code: str, comp_code: str) -> Dict[str, str]:
    """Link a company to an industry. Duplicate pairs fail on the composite key."""
    q = (
        insert(company_industries)
        .values(comp_code=comp_code, industry_code=code)
        .returning(company_industries.c.comp_code, company_industries.c.industry_code)
    )
    r = await db.execute(q)
    row = r.mappings().one()
    logger.info("industry_company_associated", industry_code=code, comp_code=comp_code)
    return dict(row)


async def delete_industry(db: AsyncSession, code: str) -> None:
    """
    Delete the industry's join rows, then the industry. Both statements run in the
    request transaction; NotFoundError (industry row absent) rolls both back.
    """
    await db.execute(delete(company_industries).where(company_industries.c.industry_code == code))
    r = await db.execute(delete(Industry).where(Industry.code == code))
    if r.rowcount == 0:
        raise NotFoundError(f"Can't find industry with code of {code}")
    logger.info("industry_deleted", code=code)


async def delete_association(db: AsyncSession, code: str, comp_code: str) -> None:
    """Remove one company <-> industry link. Raises NotFoundError if it did not exist."""
    q = delete(company_industries).where(
        company_industries.c.industry_code == code,
        company_industries.c.comp_code == comp_code,
    )
    r = await db.execute(q)
    if r.rowcount == 0:
        raise NotFoundError(
            f"Can't find company-industry relation with industry_code {code} and comp_code {comp_code}"
        )
    logger.info("industry_company_dissociated", industry_code=code, comp_code=comp_code)
