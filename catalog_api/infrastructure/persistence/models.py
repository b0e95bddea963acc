from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class CatalogBrand:
    __tablename__ = "catalog_brands"

    id: Mapped[int] = mapped_column(primary_key=True)
    brand: Mapped[str] = mapped_column(String(100))


@table_registry.mapped_as_dataclass
class CatalogType:
    __tablename__ = "catalog_types"

    id: Mapped[int] = mapped_column(primary_key=True)
    type: Mapped[str] = mapped_column(String(100))


@table_registry.mapped_as_dataclass
class CatalogItem:
    __tablename__ = "catalog_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(50))
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2))
    catalog_brand_id: Mapped[int] = mapped_column(ForeignKey("catalog_brands.id"), index=True)
    catalog_type_id: Mapped[int] = mapped_column(ForeignKey("catalog_types.id"), index=True)
    description: Mapped[Optional[str]] = mapped_column(default=None)
    picture_uri: Mapped[Optional[str]] = mapped_column(default=None)
