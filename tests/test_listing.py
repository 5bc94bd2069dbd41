"""
Tests for ListEngine: soft-delete scoping, search, ordering and pagination.
Uses an in-memory SQLite database per test.
"""
import unittest

from exceptions import NotFoundError
from schemas.common import Paginated
from schemas.query import QuerySpec, SortDirection
from services.adapters import BrandAdapter, ResourceAdapter
from services.listing import ListEngine
from services.mutation import MutationTransaction
from tests.support import create_schema, memory_engine, session_factory


def _spec(**overrides):
    return QuerySpec(**overrides)


class TestListEngine(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.engine = memory_engine()
        await create_schema(self.engine)
        self.session = session_factory(self.engine)()
        self.adapter = BrandAdapter()
        self.lists = ListEngine(self.session)
        self.mutations = MutationTransaction(self.session)
        self.acme = await self.mutations.create(self.adapter, {"name": "Acme"})
        self.beta = await self.mutations.create(self.adapter, {"name": "Beta"})
        self.cobalt = await self.mutations.create(self.adapter, {"name": "Cobalt"})

    async def asyncTearDown(self):
        await self.session.close()
        await self.engine.dispose()

    async def test_search_is_case_insensitive_substring(self):
        rows = await self.lists.list(self.adapter, _spec(search="acm"))
        self.assertEqual([r.name for r in rows], ["Acme"])
        rows = await self.lists.list(self.adapter, _spec(search="BET"))
        self.assertEqual([r.name for r in rows], ["Beta"])

    async def test_search_without_match_is_empty(self):
        self.assertEqual(await self.lists.list(self.adapter, _spec(search="xyz")), [])

    async def test_sort_by_name_both_directions(self):
        asc = await self.lists.list(self.adapter, _spec(sort_field="name", sort_direction=SortDirection.ASC))
        desc = await self.lists.list(self.adapter, _spec(sort_field="name", sort_direction=SortDirection.DESC))
        self.assertEqual([r.name for r in asc], ["Acme", "Beta", "Cobalt"])
        self.assertEqual([r.name for r in desc], ["Cobalt", "Beta", "Acme"])

    async def test_soft_deleted_rows_hidden_by_default(self):
        await self.mutations.delete(self.adapter, self.beta.id)
        rows = await self.lists.list(self.adapter, _spec(sort_field="name", sort_direction=SortDirection.ASC))
        self.assertEqual([r.name for r in rows], ["Acme", "Cobalt"])

    async def test_trashed_view_is_exclusive(self):
        """include_trashed returns only soft-deleted rows, not live and deleted together."""
        await self.mutations.delete(self.adapter, self.beta.id)
        rows = await self.lists.list(self.adapter, _spec(include_trashed=True))
        self.assertEqual([r.id for r in rows], [self.beta.id])
        self.assertIsNotNone(rows[0].deleted_at)

    async def test_trashed_view_respects_search(self):
        await self.mutations.delete(self.adapter, self.beta.id)
        rows = await self.lists.list(self.adapter, _spec(include_trashed=True, search="acm"))
        self.assertEqual(rows, [])

    async def test_pagination_meta(self):
        page = await self.lists.list(
            self.adapter, _spec(paginate=True, per_page=2, page=2, sort_field="name", sort_direction=SortDirection.ASC)
        )
        self.assertIsInstance(page, Paginated)
        self.assertEqual([r.name for r in page.data], ["Cobalt"])
        self.assertEqual(page.meta.total, 3)
        self.assertEqual(page.meta.per_page, 2)
        self.assertEqual(page.meta.current_page, 2)
        self.assertEqual(page.meta.last_page, 2)

    async def test_pagination_total_ignores_limit(self):
        page = await self.lists.list(self.adapter, _spec(paginate=True, per_page=1, search="a"))
        # "Acme", "Beta", "Cobalt" all contain an "a"
        self.assertEqual(page.meta.total, 3)
        self.assertEqual(len(page.data), 1)
        self.assertEqual(page.meta.last_page, 3)

    async def test_page_beyond_last_is_empty(self):
        page = await self.lists.list(self.adapter, _spec(paginate=True, per_page=2, page=5))
        self.assertEqual(page.data, [])
        self.assertEqual(page.meta.total, 3)
        self.assertEqual(page.meta.current_page, 5)

    async def test_empty_result_has_one_last_page(self):
        page = await self.lists.list(self.adapter, _spec(paginate=True, search="xyz"))
        self.assertEqual(page.data, [])
        self.assertEqual(page.meta.total, 0)
        self.assertEqual(page.meta.last_page, 1)

    async def test_huge_page_number_is_empty_page(self):
        page = await self.lists.list(self.adapter, _spec(paginate=True, page=10**20))
        self.assertEqual(page.data, [])
        self.assertEqual(page.meta.total, 3)
        self.assertEqual(page.meta.current_page, 10**20)
        self.assertEqual(page.meta.last_page, 1)

    async def test_huge_per_page_returns_everything(self):
        page = await self.lists.list(self.adapter, _spec(paginate=True, per_page=10**20))
        self.assertEqual(len(page.data), 3)
        self.assertEqual(page.meta.per_page, 10**20)
        self.assertEqual(page.meta.last_page, 1)

    async def test_search_wildcards_match_literally(self):
        """% and _ in the search text are ordinary characters, not LIKE wildcards."""
        self.assertEqual(await self.lists.list(self.adapter, _spec(search="%")), [])
        self.assertEqual(await self.lists.list(self.adapter, _spec(search="_")), [])
        await self.mutations.create(self.adapter, {"name": "Save 50%"})
        await self.mutations.create(self.adapter, {"name": "snake_case"})
        rows = await self.lists.list(self.adapter, _spec(search="50%"))
        self.assertEqual([r.name for r in rows], ["Save 50%"])
        rows = await self.lists.list(self.adapter, _spec(search="e_c"))
        self.assertEqual([r.name for r in rows], ["snake_case"])

    def test_adapter_base_is_abstract(self):
        with self.assertRaises(TypeError):
            ResourceAdapter()

    async def test_find_returns_active_row(self):
        found = await self.lists.find(self.adapter, self.acme.id)
        self.assertEqual(found.name, "Acme")

    async def test_find_missing_or_deleted_raises(self):
        with self.assertRaises(NotFoundError) as ctx:
            await self.lists.find(self.adapter, "01HZZZZZZZZZZZZZZZZZZZZZZZ")
        self.assertEqual(ctx.exception.message, "Brand not found")
        await self.mutations.delete(self.adapter, self.acme.id)
        with self.assertRaises(NotFoundError):
            await self.lists.find(self.adapter, self.acme.id)


if __name__ == "__main__":
    unittest.main()
