"""
Lighthouse pinning service client.

Uploads files to IPFS/Filecoin through the Lighthouse HTTP API and
queries the account's upload listing.
"""

import json
import logging
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

import httpx

from lineage_tracker.core.config import Settings, settings
from lineage_tracker.utils.file_size import format_file_size

logger = logging.getLogger(__name__)

METADATA_FILENAME = "metadata.json"


class LighthouseServiceError(Exception):
    """Base exception for Lighthouse service errors."""
    pass


class LighthouseConfigError(LighthouseServiceError):
    """Raised when the Lighthouse API key is not configured."""
    pass


class LighthouseConnectionError(LighthouseServiceError):
    """Raised when a request to Lighthouse fails."""
    pass


class LighthouseUploadError(LighthouseServiceError):
    """Raised when Lighthouse does not return a content identifier."""
    pass


@dataclass(frozen=True)
class PinFile:
    """A local file to pin, with its declared size."""

    path: Path
    filename: str
    size: int
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class UploadResult:
    """Root CID of a pinned upload and its human-readable size."""

    content_id: str
    display_size: str


class LighthouseService:
    """
    Client for the Lighthouse pinning API.

    Attributes:
        api_key: Lighthouse API key.
        upload_url: Base URL of the upload node.
        api_url: Base URL of the account API.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str | None = None,
        upload_url: str | None = None,
        api_url: str | None = None,
        timeout: int | None = None,
        config: Settings | None = None,
    ):
        """
        Initialize the Lighthouse service.

        Unset arguments are read from ``config``, which defaults to the
        process settings. A key missing from ``config`` stays missing.

        Args:
            api_key: Lighthouse API key. Defaults to config.
            upload_url: Upload node base URL. Defaults to config.
            api_url: Account API base URL. Defaults to config.
            timeout: Request timeout in seconds. Defaults to config.
            config: Settings supplying the defaults.
        """
        config = config if config is not None else settings
        self.api_key = api_key if api_key is not None else config.lighthouse_api_key
        self.upload_url = (upload_url or config.lighthouse_upload_url).rstrip("/")
        self.api_url = (api_url or config.lighthouse_api_url).rstrip("/")
        self.timeout = timeout or config.lighthouse_timeout

    @property
    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self.api_key)

    def _get_headers(self) -> dict[str, str]:
        """
        Get HTTP headers carrying the API key.

        Raises:
            LighthouseConfigError: If no API key is configured.
        """
        if not self.api_key:
            raise LighthouseConfigError("Lighthouse API key not configured")
        return {"Authorization": f"Bearer {self.api_key}"}

    async def upload(
        self,
        files: Sequence[PinFile],
        metadata: Optional[dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> UploadResult:
        """
        Pin files, plus an optional ``metadata.json``, as one directory.

        The reported size is the sum of the declared file sizes and the
        serialised metadata; file contents are not measured.

        Args:
            files: Local files to upload.
            metadata: Metadata to bundle as ``metadata.json``.
            name: Optional name for the upload.

        Returns:
            UploadResult with the root CID and formatted size.

        Raises:
            LighthouseConfigError: If no API key is configured.
            LighthouseConnectionError: If the request fails.
            LighthouseUploadError: If no CID is returned.
        """
        headers = self._get_headers()
        total_size = sum(f.size for f in files)

        params = {"wrap-with-directory": "true"}
        if name:
            params["name"] = name

        with ExitStack() as stack:
            parts: list[tuple[str, tuple[str, Any, str]]] = [
                ("file", (f.filename, stack.enter_context(open(f.path, "rb")), f.content_type))
                for f in files
            ]
            if metadata is not None:
                payload = json.dumps(metadata, indent=2).encode("utf-8")
                total_size += len(payload)
                parts.append(("file", (METADATA_FILENAME, payload, "application/json")))

            logger.info(f"Uploading {len(parts)} file(s) to Lighthouse ({total_size} bytes)")
            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(
                        f"{self.upload_url}/api/v0/add",
                        params=params,
                        files=parts,
                        headers=headers,
                    )
                    response.raise_for_status()
                    body = response.text
            except httpx.HTTPError as e:
                raise LighthouseConnectionError(f"Failed to upload to Lighthouse: {str(e)}")

        content_id = self._parse_root_hash(body)
        logger.info(f"Pinned upload as {content_id}")
        return UploadResult(content_id=content_id, display_size=format_file_size(total_size))

    @staticmethod
    def _parse_root_hash(body: str) -> str:
        """
        Extract the root CID from an ``add`` response.

        The node answers with one JSON object per line; with directory
        wrapping the last entry is the directory itself.

        Raises:
            LighthouseUploadError: If no entry carries a ``Hash``.
        """
        entries = []
        for line in body.splitlines():
            if not line.strip():
                continue
            try:
                entries.append(json.loads(line))
            except json.JSONDecodeError:
                raise LighthouseUploadError("Unexpected response from Lighthouse")

        if not entries or not isinstance(entries[-1], dict) or not entries[-1].get("Hash"):
            raise LighthouseUploadError("Failed to get CID from Lighthouse")
        return entries[-1]["Hash"]

    async def get_uploads(self) -> dict[str, Any]:
        """
        List the account's uploads.

        Returns:
            The response body as returned by Lighthouse.

        Raises:
            LighthouseConfigError: If no API key is configured.
            LighthouseConnectionError: If the request fails.
        """
        headers = self._get_headers()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    f"{self.api_url}/api/user/files_uploaded",
                    headers=headers,
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            raise LighthouseConnectionError(f"Failed to list uploads: {str(e)}")
        except ValueError as e:
            raise LighthouseConnectionError(f"Invalid uploads response: {str(e)}")

    async def exists(self, cid: str) -> bool:
        """
        Check whether ``cid`` is among the account's uploads.

        Scans the first page of the upload listing for an exact match.

        Args:
            cid: Content identifier to look for.

        Returns:
            True if an upload with this CID exists.

        Raises:
            LighthouseConnectionError: If the listing is not a mapping of upload entries.
        """
        data = await self.get_uploads()
        if not isinstance(data, dict):
            raise LighthouseConnectionError("Invalid uploads response")
        entries = data.get("fileList") or data.get("uploads") or []
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise LighthouseConnectionError("Invalid uploads response")
        return any(entry.get("cid") == cid for entry in entries)
