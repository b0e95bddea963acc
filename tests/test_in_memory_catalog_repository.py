import pytest

from catalog_api.domain.models.catalog_specification import CatalogFilter, CatalogPageWindow
from catalog_api.infrastructure.adapters.repositories.in_memory_catalog_repository import (
    InMemoryCatalogItemRepository,
    InMemoryCatalogLookupRepository,
)
from catalog_api.infrastructure.persistence.seed import default_brands, default_items, default_types
from .factories import catalog_item_factory


class TestInMemoryCatalogItemRepository:
    @pytest.fixture
    def repository(self):
        items = [
            catalog_item_factory.create(id=3, brand_id=1, type_id=1),
            catalog_item_factory.create(id=1, brand_id=1, type_id=2),
            catalog_item_factory.create(id=2, brand_id=2, type_id=1),
            catalog_item_factory.create(id=4, brand_id=2, type_id=2),
        ]
        return InMemoryCatalogItemRepository(items)

    @pytest.mark.asyncio
    async def test_count_without_filter(self, repository):
        assert await repository.count(CatalogFilter()) == 4

    @pytest.mark.asyncio
    async def test_count_with_brand_and_type(self, repository):
        assert await repository.count(CatalogFilter(brand_id=2, type_id=2)) == 1

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_id(self, repository):
        items = await repository.list(CatalogPageWindow(skip=0, take=10))

        assert [item.id for item in items] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_list_applies_window_after_filter(self, repository):
        window = CatalogPageWindow(filter=CatalogFilter(type_id=1), skip=1, take=5)

        items = await repository.list(window)

        assert [item.id for item in items] == [3]

    @pytest.mark.asyncio
    async def test_list_with_zero_take_is_empty(self, repository):
        assert await repository.list(CatalogPageWindow(skip=0, take=0)) == []

    @pytest.mark.asyncio
    async def test_list_past_the_end_is_empty(self, repository):
        assert await repository.list(CatalogPageWindow(skip=100, take=10)) == []

    @pytest.mark.asyncio
    async def test_get_by_id(self, repository):
        item = await repository.get_by_id(2)

        assert item is not None
        assert item.catalog_brand_id == 2
        assert await repository.get_by_id(999) is None


class TestInMemoryCatalogLookupRepository:
    @pytest.mark.asyncio
    async def test_seeded_lookups(self):
        repository = InMemoryCatalogLookupRepository(default_brands(), default_types())

        brands = await repository.list_brands()
        types = await repository.list_types()

        assert [b.brand for b in brands] == ["Azure", ".NET", "Visual Studio", "SQL Server", "Other"]
        assert [t.type for t in types] == ["Mug", "T-Shirt", "Sheet", "USB Memory Stick"]


def test_seed_items_reference_seeded_lookups():
    brand_ids = {b.id for b in default_brands()}
    type_ids = {t.id for t in default_types()}

    items = default_items()

    assert len(items) == 12
    assert all(item.catalog_brand_id in brand_ids for item in items)
    assert all(item.catalog_type_id in type_ids for item in items)
