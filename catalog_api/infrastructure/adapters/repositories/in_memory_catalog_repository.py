from typing import Iterable, List, Optional

from catalog_api.domain.models.catalog_item import CatalogItem
from catalog_api.domain.models.catalog_lookup import CatalogBrand, CatalogType
from catalog_api.domain.models.catalog_specification import CatalogFilter, CatalogPageWindow
from catalog_api.domain.ports.repositories.catalog_item_repository import CatalogItemRepository
from catalog_api.domain.ports.repositories.catalog_lookup_repository import CatalogLookupRepository


class InMemoryCatalogItemRepository(CatalogItemRepository):
    def __init__(self, items: Iterable[CatalogItem] = ()):
        self._items = sorted(items, key=lambda item: item.id)

    def _matching(self, catalog_filter: CatalogFilter) -> List[CatalogItem]:
        return [item for item in self._items if catalog_filter.matches(item)]

    async def count(self, filter: CatalogFilter) -> int:
        return len(self._matching(filter))

    async def list(self, window: CatalogPageWindow) -> List[CatalogItem]:
        if window.take == 0:
            return []
        matching = self._matching(window.filter)
        return matching[window.skip : window.skip + window.take]

    async def get_by_id(self, item_id: int) -> Optional[CatalogItem]:
        return next((item for item in self._items if item.id == item_id), None)


class InMemoryCatalogLookupRepository(CatalogLookupRepository):
    def __init__(self, brands: Iterable[CatalogBrand] = (), types: Iterable[CatalogType] = ()):
        self._brands = sorted(brands, key=lambda brand: brand.id)
        self._types = sorted(types, key=lambda catalog_type: catalog_type.id)

    async def list_brands(self) -> List[CatalogBrand]:
        return list(self._brands)

    async def list_types(self) -> List[CatalogType]:
        return list(self._types)
