"""Tests for attachment upload and download."""

import pytest

from apphub.errors.exceptions import NotFoundError
from apphub.services.uploads import UploadStore, sanitize_filename


@pytest.mark.asyncio
async def test_upload_and_download(client):
    r = await client.post(
        "/api/upload",
        files={"file": ("project brief.txt", b"scope notes", "text/plain")},
    )
    assert r.status_code == 200
    stored = r.json()
    assert stored["originalName"] == "project brief.txt"
    assert stored["size"] == len(b"scope notes")
    assert stored["filename"].endswith("-project_brief.txt")

    r = await client.get(f"/api/files/{stored['filename']}")
    assert r.status_code == 200
    assert r.content == b"scope notes"
    assert "project_brief.txt" in r.headers["content-disposition"]


@pytest.mark.asyncio
async def test_upload_rejects_extension(client):
    r = await client.post(
        "/api/upload",
        files={"file": ("payload.exe", b"MZ", "application/octet-stream")},
    )
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid file type"


@pytest.mark.asyncio
async def test_upload_rejects_oversize(client):
    r = await client.post(
        "/api/upload",
        files={"file": ("big.txt", b"x" * 2048, "text/plain")},
    )
    assert r.status_code == 400
    assert r.json()["message"] == "File too large"


@pytest.mark.asyncio
async def test_upload_requires_file(client):
    r = await client.post("/api/upload", data={"note": "no file"})
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_download_missing(client):
    r = await client.get("/api/files/123-missing.pdf")
    assert r.status_code == 404
    assert r.json() == {"message": "File not found"}


def test_resolve_rejects_paths_outside_root(tmp_path):
    (tmp_path / "secret.json").write_text("{}")
    store = UploadStore(tmp_path / "uploads", max_bytes=10, allowed_extensions=[".txt"])
    (tmp_path / "uploads").mkdir()
    with pytest.raises(NotFoundError):
        store.resolve("../secret.json")


def test_sanitize_and_original_name():
    assert sanitize_filename("Q3 plan (final).pdf") == "Q3_plan__final_.pdf"
    assert UploadStore.original_name("1700000000000-Q3_plan.pdf") == "Q3_plan.pdf"
    assert UploadStore.original_name("plain.pdf") == "plain.pdf"
