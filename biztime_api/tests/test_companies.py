"""
Companies API:
- list includes industries; get includes industries + invoice ids; 404 on unknown code.
- POST derives code from name (slug), PUT 404 on unknown code.
- DELETE reports deleted even when nothing matched.
"""
import pytest
from httpx import AsyncClient

from conftest import add_industry, add_invoice, link


@pytest.mark.asyncio
async def test_list_companies(client: AsyncClient, testco) -> None:
    resp = await client.get("/companies")
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"companies": [{"code": "testco", "name": "TestCompany", "industries": []}]}


@pytest.mark.asyncio
async def test_list_companies_attaches_industries(client: AsyncClient, testco) -> None:
    await add_industry("tech", "Technology")
    await link("testco", "tech")

    resp = await client.get("/companies/")
    assert resp.status_code == 200, resp.text
    assert resp.json()["companies"][0]["industries"] == [{"code": "tech", "industry": "Technology"}]


@pytest.mark.asyncio
async def test_get_company(client: AsyncClient, testco) -> None:
    resp = await client.get("/companies/testco")
    assert resp.status_code == 200, resp.text
    assert resp.json() == {
        "company": {
            "code": "testco",
            "name": "TestCompany",
            "description": "A company for testing",
            "industries": [],
            "invoices": [],
        }
    }


@pytest.mark.asyncio
async def test_get_company_lowercases_code_and_lists_invoice_ids(client: AsyncClient, testco) -> None:
    first = await add_invoice("testco", 100)
    second = await add_invoice("testco", 250)
    await add_industry("acct", "Accounting")
    await link("testco", "acct")

    resp = await client.get("/companies/TESTCO")
    assert resp.status_code == 200, resp.text
    company = resp.json()["company"]
    assert company["invoices"] == [first.id, second.id]
    assert company["industries"] == [{"code": "acct", "industry": "Accounting"}]


@pytest.mark.asyncio
async def test_get_company_not_found(client: AsyncClient, testco) -> None:
    for _ in range(2):
        resp = await client.get("/companies/nonexistent")
        assert resp.status_code == 404
        assert resp.json() == {
            "error": {"message": "Can't find company with code of nonexistent", "status": 404}
        }


@pytest.mark.asyncio
async def test_create_company_derives_code(client: AsyncClient, testco) -> None:
    resp = await client.post(
        "/companies",
        json={"code": "ignored", "name": "NewCo", "description": "A new company"},
    )
    assert resp.status_code == 201, resp.text
    assert resp.json() == {"company": {"code": "newco", "name": "NewCo", "description": "A new company"}}

    resp = await client.get("/companies/newco")
    assert resp.status_code == 200
    company = resp.json()["company"]
    assert company["name"] == "NewCo"
    assert company["description"] == "A new company"
    assert company["industries"] == []
    assert company["invoices"] == []


@pytest.mark.asyncio
async def test_create_company_slug_with_punctuation(client: AsyncClient, testco) -> None:
    resp = await client.post("/companies", json={"name": "Acme Widgets, Inc.", "description": "Widgets"})
    assert resp.status_code == 201, resp.text
    assert resp.json()["company"]["code"] == "acme-widgets-inc"


@pytest.mark.asyncio
async def test_create_duplicate_company_is_server_error(client: AsyncClient, testco) -> None:
    resp = await client.post("/companies", json={"name": "TestCo", "description": "clash on code"})
    assert resp.status_code == 500
    assert resp.json()["error"]["status"] == 500

    # The failed insert was rolled back; the original row is intact.
    resp = await client.get("/companies/testco")
    assert resp.json()["company"]["name"] == "TestCompany"


@pytest.mark.asyncio
async def test_create_company_name_without_slug_chars(client: AsyncClient, testco) -> None:
    resp = await client.post("/companies", json={"name": "!!!"})
    assert resp.status_code == 400
    assert resp.json()["error"]["status"] == 400


@pytest.mark.asyncio
async def test_update_company(client: AsyncClient, testco) -> None:
    resp = await client.put(
        "/companies/testco",
        json={"name": "UpdatedCo", "description": "An updated company"},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json() == {
        "company": {"code": "testco", "name": "UpdatedCo", "description": "An updated company"}
    }


@pytest.mark.asyncio
async def test_update_company_not_found(client: AsyncClient, testco) -> None:
    resp = await client.put("/companies/nonexistent")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Can't update company with code of nonexistent"


@pytest.mark.asyncio
async def test_delete_company(client: AsyncClient, testco) -> None:
    resp = await client.delete("/companies/testco")
    assert resp.status_code == 200
    assert resp.json() == {"status": "deleted"}

    resp = await client.get("/companies/testco")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_missing_company_still_reports_deleted(client: AsyncClient, testco) -> None:
    resp = await client.delete("/companies/nonexistent")
    assert resp.status_code == 200
    assert resp.json() == {"status": "deleted"}


@pytest.mark.asyncio
async def test_delete_company_cascades_to_invoices(client: AsyncClient, testco) -> None:
    invoice = await add_invoice("testco", 100)

    resp = await client.delete("/companies/testco")
    assert resp.status_code == 200

    resp = await client.get(f"/invoices/{invoice.id}")
    assert resp.status_code == 404
