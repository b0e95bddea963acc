import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_api.domain.services.pagination import DEFAULT_PAGE_SIZE


class CatalogItemPublic(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    description: Optional[str] = None
    price: float
    picture_uri: Optional[str] = None
    catalog_brand_id: int
    catalog_type_id: int


class ListPagedCatalogItemRequest(BaseModel):
    """Paging/filter input. Bounds are checked by the use case, not here."""

    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    catalog_brand_id: Optional[int] = None
    catalog_type_id: Optional[int] = None
    correlation_id: str = Field(default_factory=lambda: uuid.uuid4().hex)


class ListPagedCatalogItemResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    correlation_id: str
    catalog_items: List[CatalogItemPublic] = Field(default_factory=list)
    page_count: int = 0


class GetCatalogItemResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    correlation_id: str
    catalog_item: CatalogItemPublic
