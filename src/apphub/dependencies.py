"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from apphub.services.uploads import UploadStore
from apphub.store.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Return the process-wide record store created at startup."""
    return request.app.state.store


def get_uploads(request: Request) -> UploadStore:
    return request.app.state.uploads


# Type aliases for dependency injection
Store = Annotated[RecordStore, Depends(get_store)]
Uploads = Annotated[UploadStore, Depends(get_uploads)]
