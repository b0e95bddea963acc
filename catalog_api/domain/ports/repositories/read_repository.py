from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from catalog_api.domain.models.catalog_specification import CatalogFilter, CatalogPageWindow

EntityT = TypeVar("EntityT")


class ReadRepository(ABC, Generic[EntityT]):
    @abstractmethod
    async def count(self, filter: CatalogFilter) -> int:
        pass

    @abstractmethod
    async def list(self, window: CatalogPageWindow) -> List[EntityT]:
        """Return up to ``window.take`` matches after ``window.skip``, ordered by primary key."""
        pass
