"""
Single-entity create / update / soft delete, each inside one transaction.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from database import utcnow
from services.adapters import PartialFields, ResourceAdapter
from services.listing import ListEngine


class MutationTransaction:
    def __init__(self, session: AsyncSession):
        self._session = session
        self._lists = ListEngine(session)

    @asynccontextmanager
    async def scope(self) -> AsyncIterator[AsyncSession]:
        """
        Commit when the block exits normally; roll back on any exception,
        including task cancellation, then re-raise.
        """
        try:
            yield self._session
            await self._session.commit()
        except BaseException:
            await self._session.rollback()
            raise

    async def create(self, adapter: ResourceAdapter, fields: Mapping[str, Any]):
        async with self.scope() as session:
            entity = adapter.build_entity(fields)
            session.add(entity)
            await session.flush()
        await self._session.refresh(entity)
        return entity

    async def update(self, adapter: ResourceAdapter, entity_id: str, fields: PartialFields):
        async with self.scope() as session:
            entity = await self._lists.find(adapter, entity_id)
            adapter.apply_patch(entity, fields)
            await session.flush()
        # Re-read: the store may have changed more than the patch (updated_at, triggers).
        return await self._lists.find(adapter, entity_id)

    async def delete(self, adapter: ResourceAdapter, entity_id: str) -> None:
        async with self.scope() as session:
            await self._lists.find(adapter, entity_id)
            # Column update instead of session.delete(): no ORM delete cascades.
            await session.execute(
                update(adapter.model)
                .where(adapter.identifier == entity_id)
                .values(deleted_at=utcnow())
                .execution_options(synchronize_session=False)
            )
