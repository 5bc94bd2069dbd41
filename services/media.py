from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from schemas.common import Paginated
from schemas.media import MediaCreate, MediaResponse, MediaUpdate
from schemas.query import QuerySpec
from services.adapters import MediaAdapter
from services.listing import ListEngine
from services.mutation import MutationTransaction
from services.storage import ImageKitClient, UploadedFile

logger = logging.getLogger(__name__)


class MediaService:
    """
    Media rows mirror files held by the storage provider.

    Deleting removes the remote file first and only then soft deletes the row,
    so a provider failure leaves the record in place for a retry.
    """

    def __init__(self, session: AsyncSession, storage: ImageKitClient, adapter: MediaAdapter | None = None):
        self._session = session
        self._storage = storage
        self._adapter = adapter or MediaAdapter()
        self._lists = ListEngine(session)
        self._mutations = MutationTransaction(session)

    async def list(self, spec: QuerySpec) -> Union[list[MediaResponse], Paginated[MediaResponse]]:
        result = await self._lists.list(self._adapter, spec)
        if isinstance(result, Paginated):
            return result.map(MediaResponse.model_validate)
        return [MediaResponse.model_validate(m) for m in result]

    async def find(self, media_id: str) -> MediaResponse:
        return MediaResponse.model_validate(await self._lists.find(self._adapter, media_id))

    async def create(self, body: MediaCreate) -> MediaResponse:
        media = await self._mutations.create(self._adapter, body.model_dump(mode="json", exclude_none=True))
        logger.info("media created id=%s file_id=%s", media.id, media.file_id)
        return MediaResponse.model_validate(media)

    async def update(self, media_id: str, body: MediaUpdate) -> MediaResponse:
        fields = body.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        media = await self._mutations.update(self._adapter, media_id, fields)
        logger.info("media updated id=%s fields=%s", media_id, sorted(fields))
        return MediaResponse.model_validate(media)

    async def delete(self, media_id: str) -> None:
        media = await self._lists.find(self._adapter, media_id)
        await self._storage.delete_file(media.file_id)
        await self._mutations.delete(self._adapter, media_id)
        logger.info("media deleted id=%s file_id=%s", media_id, media.file_id)

    async def upload(self, content: bytes, file_name: str) -> MediaResponse:
        uploaded = await self._storage.upload_file(content, file_name)
        return await self._record(uploaded, file_name)

    async def upload_from_url(self, url: str, file_name: Optional[str] = None) -> MediaResponse:
        uploaded = await self._storage.upload_from_url(url, file_name)
        return await self._record(uploaded, file_name or uploaded.name)

    async def _record(self, uploaded: UploadedFile, file_name: str) -> MediaResponse:
        fields = {
            "file_id": uploaded.file_id,
            "file_name": file_name,
            "url": uploaded.url,
            "thumb_url": uploaded.thumb_url,
            "file_type": PurePosixPath(file_name).suffix,
            "size": uploaded.size,
            "description": "",
        }
        media = await self._mutations.create(self._adapter, fields)
        logger.info("media uploaded id=%s file_id=%s", media.id, media.file_id)
        return MediaResponse.model_validate(media)
