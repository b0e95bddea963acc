from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class CatalogItem(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    picture_uri: Optional[str] = None
    catalog_brand_id: int
    catalog_type_id: int
