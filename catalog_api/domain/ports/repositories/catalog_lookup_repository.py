from abc import ABC, abstractmethod
from typing import List

from catalog_api.domain.models.catalog_lookup import CatalogBrand, CatalogType


class CatalogLookupRepository(ABC):
    @abstractmethod
    async def list_brands(self) -> List[CatalogBrand]:
        pass

    @abstractmethod
    async def list_types(self) -> List[CatalogType]:
        pass
