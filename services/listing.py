"""
Generic list/find over any ResourceAdapter: soft-delete scoping, search,
ordering and offset pagination.
"""
from __future__ import annotations

from typing import Any, Union

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import NotFoundError
from schemas.common import Paginated, PaginationMeta
from schemas.query import QuerySpec, SortDirection
from services.adapters import ResourceAdapter


class ListEngine:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def list(self, adapter: ResourceAdapter, spec: QuerySpec) -> Union[list[Any], Paginated]:
        # Trashed view is exclusive: soft-deleted rows only.
        stmt = adapter.trashed_query() if spec.include_trashed else adapter.base_query()
        if spec.search:
            stmt = stmt.where(adapter.search_clause(spec.search))

        sort_col = adapter.sort_column(spec.sort_field)
        ordered = stmt.order_by(sort_col.asc() if spec.sort_direction == SortDirection.ASC else sort_col.desc())
        ordered = ordered.execution_options(populate_existing=True)

        if not spec.paginate:
            result = await self._session.scalars(ordered)
            return list(result.all())

        total = await self._session.scalar(select(func.count()).select_from(stmt.subquery())) or 0
        offset = (spec.page - 1) * spec.per_page
        rows: list[Any] = []
        # limit and offset never exceed the row count
        if offset < total:
            result = await self._session.scalars(ordered.limit(min(spec.per_page, total - offset)).offset(offset))
            rows = list(result.all())
        return Paginated(
            data=rows,
            meta=PaginationMeta(
                total=total,
                per_page=spec.per_page,
                current_page=spec.page,
                last_page=max(1, (total + spec.per_page - 1) // spec.per_page),
            ),
        )

    async def find(self, adapter: ResourceAdapter, entity_id: str):
        """Active (not soft-deleted) row by id, or NotFoundError."""
        stmt = (
            adapter.base_query()
            .where(adapter.identifier == entity_id)
            .execution_options(populate_existing=True)
        )
        entity = (await self._session.scalars(stmt)).one_or_none()
        if entity is None:
            raise NotFoundError(f"{adapter.label} not found", f"No active {adapter.label.lower()} with id {entity_id}")
        return entity
