from __future__ import annotations

import logging
from typing import Union

from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import NotFoundError
from models import Category
from schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from schemas.common import Paginated
from schemas.query import QuerySpec
from services.adapters import CategoryAdapter
from services.listing import ListEngine
from services.mutation import MutationTransaction
from services.slugs import unique_slug

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, session: AsyncSession, adapter: CategoryAdapter | None = None):
        self._session = session
        self._adapter = adapter or CategoryAdapter()
        self._lists = ListEngine(session)
        self._mutations = MutationTransaction(session)

    async def list(self, spec: QuerySpec) -> Union[list[CategoryResponse], Paginated[CategoryResponse]]:
        result = await self._lists.list(self._adapter, spec)
        if isinstance(result, Paginated):
            return result.map(CategoryResponse.model_validate)
        return [CategoryResponse.model_validate(c) for c in result]

    async def active(self) -> list[CategoryResponse]:
        stmt = self._adapter.base_query().where(Category.status == "active").order_by(Category.name)
        result = await self._session.scalars(stmt)
        return [CategoryResponse.model_validate(c) for c in result.all()]

    async def find(self, category_id: str) -> CategoryResponse:
        return CategoryResponse.model_validate(await self._lists.find(self._adapter, category_id))

    async def find_by_slug(self, slug: str) -> CategoryResponse:
        stmt = self._adapter.base_query().where(Category.slug == slug)
        category = (await self._session.scalars(stmt)).one_or_none()
        if category is None:
            raise NotFoundError("Category not found", f"No active category with slug {slug}")
        return CategoryResponse.model_validate(category)

    async def create(self, body: CategoryCreate) -> CategoryResponse:
        fields = body.model_dump(exclude_none=True)
        fields["slug"] = await unique_slug(self._session, Category, body.name)
        category = await self._mutations.create(self._adapter, fields)
        logger.info("category created id=%s slug=%s", category.id, category.slug)
        return CategoryResponse.model_validate(category)

    async def update(self, category_id: str, body: CategoryUpdate) -> CategoryResponse:
        fields = body.model_dump(exclude_unset=True, exclude_none=True)
        category = await self._mutations.update(self._adapter, category_id, fields)
        logger.info("category updated id=%s fields=%s", category_id, sorted(fields))
        return CategoryResponse.model_validate(category)

    async def delete(self, category_id: str) -> None:
        await self._mutations.delete(self._adapter, category_id)
        logger.info("category deleted id=%s", category_id)
