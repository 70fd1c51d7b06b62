"""Attachment upload and download routes."""

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import FileResponse

from apphub.dependencies import Uploads

router = APIRouter(tags=["Files"])


@router.post("/upload")
async def upload_file(uploads: Uploads, file: UploadFile = File(...)) -> dict:
    stored = await uploads.save(file)
    return stored.to_json()


@router.get("/files/{filename}")
async def download_file(filename: str, uploads: Uploads) -> FileResponse:
    path = uploads.resolve(filename)
    return FileResponse(path, filename=uploads.original_name(filename))
