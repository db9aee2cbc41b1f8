"""
Shared fixtures: SQLite (aiosqlite) database, schema per test, httpx client over ASGI.
DATABASE_URL must be set before biztime is imported (engine is built at import time).
Override with TEST_DATABASE_URL to run against PostgreSQL.
"""
import os

os.environ.setdefault("APP_ENV", "test")
os.environ["DATABASE_URL"] = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///./biztime_test.db")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from biztime.db import Base, async_session_factory, engine  # noqa: E402
from biztime.main import app  # noqa: E402
from biztime.models import Company, Industry, Invoice, company_industries  # noqa: E402


@pytest_asyncio.fixture
async def schema() -> AsyncGenerator[None, None]:
    """Fresh tables for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled connections belong to this test's event loop.
    await engine.dispose()


@pytest_asyncio.fixture
async def client(schema) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def add_company(code: str, name: str, description: str = "") -> Company:
    async with async_session_factory() as session:
        company = Company(code=code, name=name, description=description)
        session.add(company)
        await session.commit()
        return company


async def add_invoice(comp_code: str, amt: float) -> Invoice:
    async with async_session_factory() as session:
        invoice = Invoice(comp_code=comp_code, amt=amt)
        session.add(invoice)
        await session.commit()
        await session.refresh(invoice)
        return invoice


async def add_industry(code: str, industry: str) -> Industry:
    async with async_session_factory() as session:
        item = Industry(code=code, industry=industry)
        session.add(item)
        await session.commit()
        return item


async def link(comp_code: str, industry_code: str) -> None:
    async with async_session_factory() as session:
        await session.execute(company_industries.insert().values(comp_code=comp_code, industry_code=industry_code))
        await session.commit()


@pytest_asyncio.fixture
async def testco(schema) -> Company:
    return await add_company("testco", "TestCompany", "A company for testing")
