from decimal import Decimal
from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_api.domain.models.catalog_item import CatalogItem
from catalog_api.domain.models.catalog_lookup import CatalogBrand, CatalogType
from catalog_api.infrastructure.logging.logger import Logger
from catalog_api.infrastructure.persistence import models

logger = Logger.get_logger(__name__)

# Rewritten to the configured catalog host by CatalogUriComposer.
PICTURE_URI_TEMPLATE = "http://catalogbaseurltobereplaced/images/products/{}.png"


def default_brands() -> List[CatalogBrand]:
    return [
        CatalogBrand(id=1, brand="Azure"),
        CatalogBrand(id=2, brand=".NET"),
        CatalogBrand(id=3, brand="Visual Studio"),
        CatalogBrand(id=4, brand="SQL Server"),
        CatalogBrand(id=5, brand="Other"),
    ]


def default_types() -> List[CatalogType]:
    return [
        CatalogType(id=1, type="Mug"),
        CatalogType(id=2, type="T-Shirt"),
        CatalogType(id=3, type="Sheet"),
        CatalogType(id=4, type="USB Memory Stick"),
    ]


def default_items() -> List[CatalogItem]:
    rows = [
        # (type, brand, description, name, price)
        (2, 2, ".NET Bot Black Sweatshirt", ".NET Bot Black Sweatshirt", "19.5"),
        (1, 2, ".NET Black & White Mug", ".NET Black & White Mug", "8.50"),
        (2, 5, "Prism White T-Shirt", "Prism White T-Shirt", "12"),
        (2, 2, ".NET Foundation Sweatshirt", ".NET Foundation Sweatshirt", "12"),
        (3, 5, "Roslyn Red Sheet", "Roslyn Red Sheet", "8.5"),
        (2, 2, ".NET Blue Sweatshirt", ".NET Blue Sweatshirt", "12"),
        (2, 5, "Roslyn Red T-Shirt", "Roslyn Red T-Shirt", "12"),
        (2, 5, "Kudu Purple Sweatshirt", "Kudu Purple Sweatshirt", "8.5"),
        (1, 5, "Cup<T> White Mug", "Cup<T> White Mug", "12"),
        (3, 2, ".NET Foundation Sheet", ".NET Foundation Sheet", "12"),
        (3, 2, "Cup<T> Sheet", "Cup<T> Sheet", "8.5"),
        (2, 5, "Prism White TShirt", "Prism White TShirt", "12"),
    ]
    return [
        CatalogItem(
            id=index,
            name=name,
            description=description,
            price=Decimal(price),
            picture_uri=PICTURE_URI_TEMPLATE.format(index),
            catalog_brand_id=brand_id,
            catalog_type_id=type_id,
        )
        for index, (type_id, brand_id, description, name, price) in enumerate(rows, start=1)
    ]


async def create_tables(session_factory: async_sessionmaker[AsyncSession]) -> None:
    async with session_factory() as session:
        connection = await session.connection()
        await connection.run_sync(models.table_registry.metadata.create_all)
        await session.commit()


async def seed_catalog(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """Insert the default brands, types and items into an empty catalog.

    Returns the number of items inserted (0 when the catalog already has data).
    """
    async with session_factory() as session:
        existing = await session.scalar(select(func.count()).select_from(models.CatalogItem))
        if existing:
            logger.info("Catalog already contains %d items, skipping seed", existing)
            return 0

        session.add_all([models.CatalogBrand(id=b.id, brand=b.brand) for b in default_brands()])
        session.add_all([models.CatalogType(id=t.id, type=t.type) for t in default_types()])
        await session.flush()

        items = default_items()
        session.add_all(
            [
                models.CatalogItem(
                    id=item.id,
                    name=item.name,
                    price=item.price,
                    catalog_brand_id=item.catalog_brand_id,
                    catalog_type_id=item.catalog_type_id,
                    description=item.description,
                    picture_uri=item.picture_uri,
                )
                for item in items
            ]
        )
        await session.commit()

    logger.info("Seeded catalog with %d items", len(items))
    return len(items)
