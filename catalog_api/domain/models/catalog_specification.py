from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog_api.domain.models.catalog_item import CatalogItem


class CatalogFilter(BaseModel):
    """Brand/type predicate. A missing id matches every item."""

    model_config = ConfigDict(frozen=True)

    brand_id: Optional[int] = None
    type_id: Optional[int] = None

    def matches(self, item: CatalogItem) -> bool:
        if self.brand_id is not None and item.catalog_brand_id != self.brand_id:
            return False
        if self.type_id is not None and item.catalog_type_id != self.type_id:
            return False
        return True


class CatalogPageWindow(BaseModel):
    """A filter plus the skip/take window of one page."""

    model_config = ConfigDict(frozen=True)

    filter: CatalogFilter = Field(default_factory=CatalogFilter)
    skip: int = Field(default=0, ge=0)
    take: int = Field(default=0, ge=0)
