"""Upload endpoints — Store user-contributed files and list stored uploads."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from openfinder.api.deps import get_upload_store
from openfinder.models.response import ErrorResponse, FileListResponse, UploadResponse
from openfinder.storage.uploads import MissingFileError, UploadError, UploadStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload File",
    description=(
        "Store a single file sent as multipart form field `file`. Accepted "
        "types: PDF, EPUB, JPEG, PNG, MP4, ZIP and plain text, up to the "
        "configured size limit (100 MB by default)."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "No file, disallowed type, or file too large"},
        500: {"model": ErrorResponse, "description": "The file could not be written"},
    },
)
async def upload_file(
    file: UploadFile | None = File(default=None),
    store: UploadStore = Depends(get_upload_store),
) -> UploadResponse | JSONResponse:
    """Validate and store an uploaded file."""
    try:
        if file is None:
            raise MissingFileError("No file provided")
        if file.size is not None:
            store.validate(file.content_type, file.size)
        data = await file.read()
        stored = await store.save(file.filename, file.content_type, data)
    except UploadError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.error("Upload failed: %s", e, exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to upload file"})

    return UploadResponse(success=True, file=stored)


@router.get(
    "/upload",
    response_model=FileListResponse,
    summary="List Uploaded Files",
    description="List files in the upload directory. Returns an empty list if nothing was uploaded yet.",
)
async def list_uploads(store: UploadStore = Depends(get_upload_store)) -> FileListResponse:
    """List stored uploads."""
    return FileListResponse(files=store.list_files())
