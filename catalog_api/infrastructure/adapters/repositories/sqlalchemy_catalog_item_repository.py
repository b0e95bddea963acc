from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_api.domain.exceptions import StoreUnavailableError
from catalog_api.domain.models.catalog_item import CatalogItem as DomainCatalogItem
from catalog_api.domain.models.catalog_specification import CatalogFilter, CatalogPageWindow
from catalog_api.domain.ports.repositories.catalog_item_repository import CatalogItemRepository
from catalog_api.infrastructure.persistence.models import CatalogItem as SQLCatalogItem


class SQLAlchemyCatalogItemRepository(CatalogItemRepository):
    """Catalog item reads. Each call opens its own session, so calls may run concurrently."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    def _to_domain(self, sql_item: SQLCatalogItem) -> DomainCatalogItem:
        return DomainCatalogItem(
            id=sql_item.id,
            name=sql_item.name,
            description=sql_item.description,
            price=sql_item.price,
            picture_uri=sql_item.picture_uri,
            catalog_brand_id=sql_item.catalog_brand_id,
            catalog_type_id=sql_item.catalog_type_id,
        )

    def _conditions(self, catalog_filter: CatalogFilter) -> list:
        conditions = []
        if catalog_filter.brand_id is not None:
            conditions.append(SQLCatalogItem.catalog_brand_id == catalog_filter.brand_id)
        if catalog_filter.type_id is not None:
            conditions.append(SQLCatalogItem.catalog_type_id == catalog_filter.type_id)
        return conditions

    async def count(self, filter: CatalogFilter) -> int:
        query = select(func.count()).select_from(SQLCatalogItem).where(*self._conditions(filter))
        try:
            async with self.session_factory() as session:
                total = await session.scalar(query)
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(f"Failed to count catalog items: {e}") from e
        return int(total or 0)

    async def list(self, window: CatalogPageWindow) -> List[DomainCatalogItem]:
        if window.take == 0:
            return []

        query = (
            select(SQLCatalogItem)
            .where(*self._conditions(window.filter))
            .order_by(SQLCatalogItem.id)
            .offset(window.skip)
            .limit(window.take)
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                sql_items = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(f"Failed to list catalog items: {e}") from e
        return [self._to_domain(item) for item in sql_items]

    async def get_by_id(self, item_id: int) -> Optional[DomainCatalogItem]:
        try:
            async with self.session_factory() as session:
                sql_item = await session.scalar(select(SQLCatalogItem).where(SQLCatalogItem.id == item_id))
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(f"Failed to load catalog item {item_id}: {e}") from e
        return self._to_domain(sql_item) if sql_item else None
