"""
IPFS pinning API endpoints.

Handles multipart uploads to Lighthouse, the account upload listing and
CID existence checks.
"""

import json
import logging
import uuid
from pathlib import Path
from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse

from lineage_tracker.api.deps import get_lighthouse_service, get_settings, require_configured
from lineage_tracker.core.config import Settings
from lineage_tracker.schemas import CidCheckResponse, UploadResponse
from lineage_tracker.services.lighthouse_service import (
    LighthouseService,
    LighthouseUploadError,
    PinFile,
)
from lineage_tracker.utils.file_size import format_file_size

logger = logging.getLogger(__name__)

router = APIRouter()

CHUNK_SIZE = 1024 * 1024
UPLOAD_PATH = "/api/ipfs/upload"
# Allowance for multipart boundaries and part headers on top of the file bytes
MULTIPART_OVERHEAD = 1024 * 1024


async def reject_oversize_upload(request: Request, call_next):
    """
    Refuse uploads whose declared ``Content-Length`` exceeds the cap.

    Form parsing buffers the whole body before the endpoint runs, so this
    check happens in middleware. Requests without a length header (chunked)
    are still bounded by the per-file check while spooling.
    """
    if request.method == "POST" and request.url.path == UPLOAD_PATH:
        limit = request.app.state.settings.max_upload_size
        declared = request.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > limit + MULTIPART_OVERHEAD:
            logger.warning(f"Rejected upload of {declared} bytes")
            return JSONResponse(
                status_code=400,
                content={"detail": f"Upload exceeds the {format_file_size(limit)} limit"},
            )
    return await call_next(request)


async def _spool_upload(upload: UploadFile, path: Path, limit: int) -> int:
    """
    Copy an uploaded file to ``path`` in chunks.

    Args:
        upload: Incoming multipart file.
        path: Destination on local disk.
        limit: Maximum number of bytes allowed for this file.

    Returns:
        Number of bytes written.

    Raises:
        ValueError: If the file exceeds ``limit``.
    """
    written = 0
    with open(path, "wb") as out:
        while chunk := await upload.read(CHUNK_SIZE):
            written += len(chunk)
            if written > limit:
                raise ValueError("Upload exceeds size limit")
            out.write(chunk)
    return written


def _cleanup(paths: list[Path]) -> None:
    """Delete spooled files; failures are logged and ignored."""
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Error deleting temp file {path}: {e}")


@router.post("/upload", response_model=UploadResponse)
async def upload_to_ipfs(
    files: Annotated[list[UploadFile] | None, File(description="Files to pin")] = None,
    metadata: Annotated[str | None, Form(description="Metadata JSON bundled as metadata.json")] = None,
    name: Annotated[str | None, Form(description="Optional upload name")] = None,
    settings: Settings = Depends(get_settings),
    service: LighthouseService = Depends(get_lighthouse_service),
) -> UploadResponse:
    """
    Pin uploaded files to IPFS/Filecoin via Lighthouse.

    Files are spooled to a temporary directory, forwarded, and removed
    afterwards whatever the outcome.
    """
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")

    require_configured(service)

    parsed_metadata: Any = None
    if metadata:
        try:
            parsed_metadata = json.loads(metadata)
        except json.JSONDecodeError:
            raise HTTPException(status_code=400, detail="Invalid metadata JSON")

    spool_dir = settings.get_upload_tmp_path()
    spooled: list[Path] = []
    try:
        pin_files: list[PinFile] = []
        remaining = settings.max_upload_size
        for upload in files:
            path = spool_dir / uuid.uuid4().hex
            spooled.append(path)
            try:
                size = await _spool_upload(upload, path, remaining)
            except ValueError:
                raise HTTPException(
                    status_code=400,
                    detail=f"Upload exceeds the {format_file_size(settings.max_upload_size)} limit",
                )
            remaining -= size
            pin_files.append(
                PinFile(
                    path=path,
                    filename=upload.filename or path.name,
                    size=size,
                    content_type=upload.content_type or "application/octet-stream",
                )
            )

        result = await service.upload(pin_files, metadata=parsed_metadata, name=name)
    except HTTPException:
        raise
    except LighthouseUploadError:
        logger.exception("Lighthouse returned no CID")
        raise HTTPException(status_code=500, detail="Failed to get CID from Lighthouse")
    except Exception:
        logger.exception("Failed to upload to Lighthouse")
        raise HTTPException(status_code=500, detail="Failed to upload to IPFS/Filecoin")
    finally:
        _cleanup(spooled)

    return UploadResponse(content_id=result.content_id, display_size=result.display_size)


@router.get("/uploads")
async def list_uploads(
    service: LighthouseService = Depends(get_lighthouse_service),
) -> dict[str, Any]:
    """
    List the account's uploads as reported by Lighthouse.
    """
    require_configured(service)
    try:
        return await service.get_uploads()
    except Exception:
        logger.exception("Failed to get uploads from Lighthouse")
        raise HTTPException(status_code=500, detail="Failed to retrieve uploads from IPFS/Filecoin")


@router.get("/check/{cid}", response_model=CidCheckResponse)
async def check_cid(
    cid: str,
    service: LighthouseService = Depends(get_lighthouse_service),
) -> CidCheckResponse:
    """
    Check whether a CID is among the account's uploads.
    """
    require_configured(service)
    try:
        exists = await service.exists(cid)
    except Exception:
        logger.exception(f"Failed to check CID {cid} in Lighthouse")
        raise HTTPException(status_code=500, detail="Failed to check if CID exists in IPFS/Filecoin")
    return CidCheckResponse(exists=exists)
