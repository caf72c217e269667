"""Spreadsheet import endpoints for the Reddit Media Viewer API."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from viewer.api.dependencies import get_status_reporter, get_upload_store
from viewer.config import get_settings
from viewer.spreadsheet.importer import import_feed_names
from viewer.status import StatusReporter
from viewer.uploads import UploadStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/import", tags=["import"])
limiter = Limiter(key_func=get_remote_address)

DEFAULT_UPLOAD_NAME = "upload.xlsx"


@router.post("")
@limiter.limit("30/minute")
async def import_spreadsheet(
    request: Request,
    file: UploadFile = File(...),
    store: UploadStore = Depends(get_upload_store),
    status: StatusReporter = Depends(get_status_reporter),
):
    """
    Read subreddit names from the first column of an uploaded spreadsheet.

    Returns:
        JSON response with:
            - feeds: Subreddit names in sheet order (empty on failure)
            - query: The names joined with '+' for the subreddit input
            - status: The status message after the import

    Raises:
        HTTPException: 413 if the upload exceeds the configured size limit
    """
    settings = get_settings()

    data = await file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        logger.warning(f"Rejected oversized upload {file.filename!r}")
        raise HTTPException(status_code=413, detail="Uploaded file is too large")

    key = store.save(file.filename or DEFAULT_UPLOAD_NAME, data)
    feeds = import_feed_names(store.get(key) or b"", status, filename=key)

    return {
        "feeds": feeds,
        "query": "+".join(feeds),
        "status": status.current.model_dump(),
    }


@router.delete("")
async def clear_uploads(store: UploadStore = Depends(get_upload_store)):
    """Forget every stored upload, starting a new session."""
    cleared = len(store)
    store.clear()
    return {"ok": True, "cleared": cleared}


@router.delete("/{filename}")
async def delete_upload(filename: str, store: UploadStore = Depends(get_upload_store)):
    """
    Forget a single stored upload.

    Raises:
        HTTPException: 404 if nothing is stored under that filename
    """
    if not store.delete(filename):
        raise HTTPException(status_code=404, detail="Upload not found")
    return {"ok": True}
