from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_api.domain.exceptions import StoreUnavailableError
from catalog_api.domain.models.catalog_lookup import CatalogBrand, CatalogType
from catalog_api.domain.ports.repositories.catalog_lookup_repository import CatalogLookupRepository
from catalog_api.infrastructure.persistence.models import CatalogBrand as SQLCatalogBrand
from catalog_api.infrastructure.persistence.models import CatalogType as SQLCatalogType


class SQLAlchemyCatalogLookupRepository(CatalogLookupRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_brands(self) -> List[CatalogBrand]:
        try:
            async with self.session_factory() as session:
                rows = (await session.scalars(select(SQLCatalogBrand).order_by(SQLCatalogBrand.id))).all()
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(f"Failed to list catalog brands: {e}") from e
        return [CatalogBrand(id=row.id, brand=row.brand) for row in rows]

    async def list_types(self) -> List[CatalogType]:
        try:
            async with self.session_factory() as session:
                rows = (await session.scalars(select(SQLCatalogType).order_by(SQLCatalogType.id))).all()
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(f"Failed to list catalog types: {e}") from e
        return [CatalogType(id=row.id, type=row.type) for row in rows]
