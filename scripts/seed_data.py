"""
Seed sample BizTime data: two companies, three invoices, four industries, links.
Uses DATABASE_URL (env or .env). Tables must exist (alembic upgrade head).
Run: python scripts/seed_data.py [--reset]
  --reset  delete existing rows first
"""
import argparse
import asyncio
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(SCRIPT_DIR.parent / "biztime_api"))

from sqlalchemy import delete  # noqa: E402

from biztime.db import async_session_factory, engine  # noqa: E402
from biztime.models import Company, Industry, Invoice, company_industries  # noqa: E402

COMPANIES = [
    ("apple", "Apple Computer", "Maker of OSX."),
    ("ibm", "IBM", "Big blue."),
]
INVOICES = [
    ("apple", 100),
    ("apple", 200),
    ("ibm", 400),
]
INDUSTRIES = [
    ("acct", "Accounting"),
    ("fin", "Finance"),
    ("manu", "Manufacturing"),
    ("tech", "Technology"),
]
LINKS = [
    ("apple", "tech"),
    ("apple", "manu"),
    ("ibm", "tech"),
]


async def seed(reset: bool) -> None:
    async with async_session_factory() as session:
        if reset:
            await session.execute(delete(company_industries))
            await session.execute(delete(Invoice))
            await session.execute(delete(Industry))
            await session.execute(delete(Company))

        session.add_all(Company(code=c, name=n, description=d) for c, n, d in COMPANIES)
        session.add_all(Industry(code=c, industry=i) for c, i in INDUSTRIES)
        await session.flush()
        session.add_all(Invoice(comp_code=c, amt=a) for c, a in INVOICES)
        await session.execute(
            company_industries.insert(),
            [{"comp_code": c, "industry_code": i} for c, i in LINKS],
        )
        await session.commit()
    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed sample BizTime data")
    parser.add_argument("--reset", action="store_true", help="delete existing rows first")
    args = parser.parse_args()
    asyncio.run(seed(args.reset))
    print(
        f"Seeded {len(COMPANIES)} companies, {len(INVOICES)} invoices, "
        f"{len(INDUSTRIES)} industries, {len(LINKS)} links."
    )


if __name__ == "__main__":
    main()
