"""scripts/seed_data.py loads the sample data and --reset makes it repeatable."""
import pytest
from httpx import AsyncClient

from seed_data import COMPANIES, INDUSTRIES, INVOICES, seed


@pytest.mark.asyncio
async def test_seed_then_reseed(client: AsyncClient) -> None:
    await seed(reset=False)
    await seed(reset=True)

    resp = await client.get("/companies")
    assert len(resp.json()["companies"]) == len(COMPANIES)
    resp = await client.get("/invoices")
    assert len(resp.json()["invoices"]) == len(INVOICES)

    resp = await client.get("/industries")
    industries = {i["code"]: i for i in resp.json()["industries"]}
    assert len(industries) == len(INDUSTRIES)
    assert sorted(industries["tech"]["companies"]) == ["apple", "ibm"]
    assert industries["acct"]["companies"] == []

    resp = await client.get("/companies/apple")
    assert len(resp.json()["company"]["invoices"]) == 2
