from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogBrandPublic(BaseModel):
    id: int
    name: str


class CatalogTypePublic(BaseModel):
    id: int
    name: str


class CatalogBrandList(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    catalog_brands: List[CatalogBrandPublic]


class CatalogTypeList(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    catalog_types: List[CatalogTypePublic]
