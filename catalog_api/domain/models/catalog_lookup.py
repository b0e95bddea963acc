from pydantic import BaseModel


class CatalogBrand(BaseModel):
    id: int
    brand: str


class CatalogType(BaseModel):
    id: int
    type: str
