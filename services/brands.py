from __future__ import annotations

import logging
from typing import Union

from sqlalchemy.ext.asyncio import AsyncSession

from models import Brand
from schemas.brand import BrandCreate, BrandResponse, BrandSummary, BrandUpdate
from schemas.common import Paginated
from schemas.query import QuerySpec
from services.adapters import BrandAdapter
from services.listing import ListEngine
from services.mutation import MutationTransaction
from services.slugs import unique_slug

logger = logging.getLogger(__name__)


class BrandService:
    def __init__(self, session: AsyncSession, adapter: BrandAdapter | None = None):
        self._session = session
        self._adapter = adapter or BrandAdapter()
        self._lists = ListEngine(session)
        self._mutations = MutationTransaction(session)

    async def list(self, spec: QuerySpec) -> Union[list[BrandResponse], Paginated[BrandResponse]]:
        result = await self._lists.list(self._adapter, spec)
        if isinstance(result, Paginated):
            return result.map(BrandResponse.model_validate)
        return [BrandResponse.model_validate(b) for b in result]

    async def active(self) -> list[BrandResponse]:
        stmt = self._adapter.base_query().where(Brand.status == "active").order_by(Brand.name)
        result = await self._session.scalars(stmt)
        return [BrandResponse.model_validate(b) for b in result.all()]

    async def grouped(self) -> dict[str, list[BrandSummary]]:
        """Active brands keyed by the upper-cased first letter of their name."""
        groups: dict[str, list[BrandSummary]] = {}
        for brand in await self.active():
            if brand.name:
                groups.setdefault(brand.name[0].upper(), []).append(BrandSummary(id=brand.id, name=brand.name, slug=brand.slug))
        return groups

    async def find(self, brand_id: str) -> BrandResponse:
        return BrandResponse.model_validate(await self._lists.find(self._adapter, brand_id))

    async def create(self, body: BrandCreate) -> BrandResponse:
        fields = body.model_dump(exclude_none=True)
        fields["slug"] = await unique_slug(self._session, Brand, body.name)
        brand = await self._mutations.create(self._adapter, fields)
        logger.info("brand created id=%s slug=%s", brand.id, brand.slug)
        return BrandResponse.model_validate(brand)

    async def update(self, brand_id: str, body: BrandUpdate) -> BrandResponse:
        fields = body.model_dump(exclude_unset=True, exclude_none=True)
        brand = await self._mutations.update(self._adapter, brand_id, fields)
        logger.info("brand updated id=%s fields=%s", brand_id, sorted(fields))
        return BrandResponse.model_validate(brand)

    async def delete(self, brand_id: str) -> None:
        await self._mutations.delete(self._adapter, brand_id)
        logger.info("brand deleted id=%s", brand_id)
