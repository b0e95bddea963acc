from abc import abstractmethod
from typing import Optional

from catalog_api.domain.models.catalog_item import CatalogItem
from catalog_api.domain.ports.repositories.read_repository import ReadRepository


class CatalogItemRepository(ReadRepository[CatalogItem]):
    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[CatalogItem]:
        pass
