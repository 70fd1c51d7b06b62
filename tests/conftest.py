"""Shared test fixtures."""

import time

import pytest
from httpx import ASGITransport, AsyncClient

from apphub.services.uploads import UploadStore
from apphub.store.backend import JsonFileBackend
from apphub.store.record_store import RecordStore


@pytest.fixture
def data_file(tmp_path):
    """Path of the JSON file backing the test store."""
    return tmp_path / "data" / "apphub.json"


@pytest.fixture
def store(data_file):
    """A fresh record store persisted to a temporary file."""
    return RecordStore(JsonFileBackend(data_file))


@pytest.fixture
def uploads(tmp_path):
    return UploadStore(
        tmp_path / "uploads",
        max_bytes=1024,
        allowed_extensions=[".pdf", ".txt", ".png"],
    )


@pytest.fixture
def app(store, uploads):
    """Create a test application instance wired to the temporary store."""
    from apphub.main import create_app

    _app = create_app()
    _app.state.store = store
    _app.state.uploads = uploads
    _app.state.started_at = time.monotonic()
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
