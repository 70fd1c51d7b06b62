"""Tests for catalog export and best-effort import.

Covers:
- GET /export returns an attachment envelope with every collection
- Export followed by import into an empty store reproduces the catalog
  with category references remapped to the new IDs
- Bad records are skipped and reported without aborting the import
"""

import time

import pytest
from httpx import ASGITransport, AsyncClient

from apphub.store.backend import MemoryBackend
from apphub.store.record_store import RecordStore

APP_FIELDS = ("name", "shortDescription", "description", "url", "category", "subcategory",
              "icon", "isActive", "attachments", "rating")


async def _seed(client) -> None:
    # Burn category id 1 so exported ids differ from freshly assigned ones.
    await client.post("/api/categories", json={"name": "scratch"})
    await client.delete("/api/categories/1")
    await client.post("/api/categories", json={"name": "finance"})
    await client.post("/api/categories", json={"name": "hr", "isActive": False})
    await client.post("/api/subcategories", json={"name": "planning", "categoryId": 2})
    await client.post("/api/subcategories", json={"name": "payroll", "categoryId": 3})
    await client.post("/api/apps", json={
        "name": "Budget Tool", "url": "https://x.com", "category": "finance",
        "subcategory": "planning", "description": "<b>Budgets</b>", "rating": 4,
    })
    await client.post("/api/apps", json={
        "name": "Old Payroll", "url": "https://pay.corp.io", "category": "hr",
        "isActive": False, "attachments": ["1700-guide.pdf"],
    })
    await client.post("/api/requisitions", json={
        "title": "Vendor portal", "description": "<p>Portal</p>", "requesterName": "Sam Lee",
        "requesterEmail": "sam.lee@corp.io", "category": "procurement",
    })
    await client.patch("/api/requisitions/1", json={"status": "completed", "deployedLink": "https://v.corp.io"})


@pytest.fixture
async def empty_client():
    """A second application instance over an empty in-memory store."""
    from apphub.main import create_app

    target = create_app()
    target.state.store = RecordStore(MemoryBackend())
    target.state.started_at = time.monotonic()
    async with AsyncClient(transport=ASGITransport(app=target), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_export_envelope(client):
    await _seed(client)
    r = await client.get("/api/export")
    assert r.status_code == 200
    assert r.headers["content-disposition"].startswith("attachment;")
    assert "apphub-export-" in r.headers["content-disposition"]

    body = r.json()
    assert body["version"] == "1.0"
    assert "exportDate" in body
    assert len(body["apps"]) == 2
    assert len(body["categories"]) == 2
    assert len(body["subcategories"]) == 2
    assert len(body["projectRequisitions"]) == 1


@pytest.mark.asyncio
async def test_round_trip_into_empty_store(client, empty_client):
    await _seed(client)
    exported = (await client.get("/api/export")).json()

    r = await empty_client.post("/api/import", json=exported)
    assert r.status_code == 200
    result = r.json()
    assert result["imported"] == {"apps": 2, "categories": 2, "subcategories": 2, "requisitions": 1}
    assert result["skipped"] == []

    reimported = (await empty_client.get("/api/export")).json()

    old_categories = {row["id"]: row["name"] for row in exported["categories"]}
    new_categories = {row["id"]: row["name"] for row in reimported["categories"]}
    assert sorted(new_categories.values()) == sorted(old_categories.values())
    assert set(new_categories) == {1, 2}

    old_links = {(row["name"], old_categories[row["categoryId"]]) for row in exported["subcategories"]}
    new_links = {(row["name"], new_categories[row["categoryId"]]) for row in reimported["subcategories"]}
    assert new_links == old_links

    for old, new in zip(exported["apps"], reimported["apps"]):
        assert {k: new[k] for k in APP_FIELDS} == {k: old[k] for k in APP_FIELDS}

    requisition = reimported["projectRequisitions"][0]
    assert requisition["status"] == "completed"
    assert requisition["deployedLink"] == "https://v.corp.io"


@pytest.mark.asyncio
async def test_import_skips_bad_records(empty_client):
    payload = {
        "categories": [{"id": 5, "name": "ops"}, {"id": 6, "name": ""}],
        "subcategories": [{"name": "infra", "categoryId": 5}, {"name": "no-parent"}],
        "apps": [
            {"name": "Pager", "url": "https://pager.corp.io", "category": "ops"},
            {"name": "Broken", "url": "not a url", "category": "ops"},
            "not even an object",
        ],
    }
    r = await empty_client.post("/api/import", json=payload)
    assert r.status_code == 200
    result = r.json()
    assert result["imported"] == {"apps": 1, "categories": 1, "subcategories": 1, "requisitions": 0}
    skipped = {(row["entity"], row["index"]) for row in result["skipped"]}
    assert skipped == {("categories", 1), ("subcategories", 1), ("apps", 1), ("apps", 2)}
    assert any("url" in row["reason"] for row in result["skipped"])

    sub = (await empty_client.get("/api/subcategories")).json()
    assert sub[0]["categoryId"] == 1


@pytest.mark.asyncio
async def test_import_tolerates_non_integer_ids(empty_client):
    payload = {
        "categories": [{"id": [1], "name": "ops"}, {"id": 7, "name": "hr"}],
        "subcategories": [
            {"name": "infra", "categoryId": {"x": 1}},
            {"name": "payroll", "categoryId": 7},
        ],
        "apps": [],
    }
    r = await empty_client.post("/api/import", json=payload)
    assert r.status_code == 200
    result = r.json()
    assert result["imported"] == {"apps": 0, "categories": 2, "subcategories": 1, "requisitions": 0}
    assert [(row["entity"], row["index"]) for row in result["skipped"]] == [("subcategories", 0)]
    assert "categoryId" in result["skipped"][0]["reason"]

    sub = (await empty_client.get("/api/subcategories")).json()
    assert [(row["name"], row["categoryId"]) for row in sub] == [("payroll", 2)]


@pytest.mark.asyncio
async def test_import_reuses_existing_category(empty_client):
    await empty_client.post("/api/categories", json={"name": "ops"})
    payload = {
        "categories": [{"id": 9, "name": "ops"}],
        "subcategories": [{"name": "infra", "categoryId": 9}],
        "apps": [],
    }
    result = (await empty_client.post("/api/import", json=payload)).json()
    assert result["imported"]["categories"] == 0
    assert result["imported"]["subcategories"] == 1
    assert result["skipped"][0]["entity"] == "categories"

    assert len((await empty_client.get("/api/categories")).json()) == 1
    assert (await empty_client.get("/api/subcategories")).json()[0]["categoryId"] == 1


@pytest.mark.asyncio
async def test_import_requires_collections(empty_client):
    r = await empty_client.post("/api/import", json={"apps": []})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid import data format"
