"""
ImageKit file-storage client (upload bytes, upload by URL, delete).
Failures surface as ExternalServiceError; nothing is retried here.
"""
from __future__ import annotations

import base64
import logging
from pathlib import PurePosixPath
from typing import Any, Optional
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel

from config import Settings
from exceptions import ExternalServiceError
from utils.case import dict_keys_to_snake

logger = logging.getLogger(__name__)


class UploadedFile(BaseModel):
    file_id: str
    name: str
    url: str
    thumb_url: Optional[str] = None
    size: int = 0
    file_type: Optional[str] = None


class ImageKitClient:
    def __init__(
        self,
        private_key: str,
        upload_url: str = "https://upload.imagekit.io/api/v1/files/upload",
        api_url: str = "https://api.imagekit.io/v1",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._private_key = private_key
        self._upload_url = upload_url
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageKitClient":
        return cls(
            private_key=settings.imagekit_private_key,
            upload_url=settings.imagekit_upload_url,
            api_url=settings.imagekit_api_url,
            timeout=settings.imagekit_timeout,
        )

    async def upload_file(self, content: bytes, file_name: str) -> UploadedFile:
        encoded = base64.b64encode(content).decode("ascii")
        return await self._upload(encoded, file_name)

    async def upload_from_url(self, source_url: str, file_name: Optional[str] = None) -> UploadedFile:
        if not file_name:
            file_name = PurePosixPath(urlparse(source_url).path).name or "file"
        return await self._upload(source_url, file_name)

    async def delete_file(self, file_id: str) -> None:
        response = await self._request("DELETE", f"{self._api_url}/files/{file_id}")
        if response.status_code != 204:
            raise ExternalServiceError(
                "Failed to delete file",
                _provider_message(response) or f"failed to delete file: status code {response.status_code}",
            )
        logger.info("storage file deleted file_id=%s", file_id)

    async def _upload(self, file: str, file_name: str) -> UploadedFile:
        form = {"file": file, "fileName": file_name, "useUniqueFileName": "true"}
        response = await self._request("POST", self._upload_url, data=form)
        if response.status_code not in (200, 201):
            raise ExternalServiceError(
                "Failed to upload file",
                _provider_message(response) or f"failed to upload file: status code {response.status_code}",
            )
        try:
            body = dict_keys_to_snake(response.json())
        except ValueError as e:
            raise ExternalServiceError("Failed to upload file", f"failed to parse response: {e}") from e
        logger.info("storage file uploaded file_id=%s name=%s", body.get("file_id"), body.get("name"))
        return UploadedFile(
            file_id=body["file_id"],
            name=body.get("name") or file_name,
            url=body["url"],
            thumb_url=body.get("thumbnail_url"),
            size=body.get("size") or 0,
            file_type=body.get("file_type"),
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        auth = httpx.BasicAuth(self._private_key, "")
        try:
            if self._http_client is not None:
                return await self._http_client.request(method, url, auth=auth, **kwargs)
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await client.request(method, url, auth=auth, **kwargs)
        except httpx.HTTPError as e:
            raise ExternalServiceError("File storage unreachable", str(e)) from e


def _provider_message(response: httpx.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return None
