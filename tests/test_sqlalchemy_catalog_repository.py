from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from catalog_api.domain.exceptions import StoreUnavailableError
from catalog_api.domain.models.catalog_specification import CatalogFilter, CatalogPageWindow
from catalog_api.infrastructure.adapters.repositories.sqlalchemy_catalog_item_repository import (
    SQLAlchemyCatalogItemRepository,
)
from catalog_api.infrastructure.adapters.repositories.sqlalchemy_catalog_lookup_repository import (
    SQLAlchemyCatalogLookupRepository,
)
from catalog_api.infrastructure.persistence.seed import create_tables, seed_catalog


def _docker_available() -> bool:
    try:
        import docker

        docker.from_env().ping()
        return True
    except Exception:
        return False


class TestSQLAlchemyCatalogItemRepositoryErrors:
    """Store failures surface as StoreUnavailableError"""

    @pytest.fixture
    def broken_session_factory(self):
        session_factory = MagicMock()
        session_factory.return_value.__aenter__.side_effect = OperationalError(
            "SELECT 1", {}, ConnectionRefusedError("connection refused")
        )
        return session_factory

    @pytest.mark.asyncio
    async def test_count_wraps_driver_error(self, broken_session_factory):
        repository = SQLAlchemyCatalogItemRepository(broken_session_factory)

        with pytest.raises(StoreUnavailableError, match="Failed to count"):
            await repository.count(CatalogFilter())

    @pytest.mark.asyncio
    async def test_list_wraps_driver_error(self, broken_session_factory):
        repository = SQLAlchemyCatalogItemRepository(broken_session_factory)

        with pytest.raises(StoreUnavailableError, match="Failed to list"):
            await repository.list(CatalogPageWindow(skip=0, take=10))

    @pytest.mark.asyncio
    async def test_zero_take_skips_the_query(self, broken_session_factory):
        repository = SQLAlchemyCatalogItemRepository(broken_session_factory)

        assert await repository.list(CatalogPageWindow(skip=0, take=0)) == []
        broken_session_factory.assert_not_called()


@pytest.mark.skipif(not _docker_available(), reason="Docker is required for Postgres integration tests")
class TestSQLAlchemyCatalogRepositoryIntegration:
    """Integration tests against a seeded Postgres catalog"""

    @pytest_asyncio.fixture
    async def session_factory(self):
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer("postgres:16", driver="psycopg") as postgres:
            engine = create_async_engine(postgres.get_connection_url())
            session_factory = async_sessionmaker(engine, expire_on_commit=False)
            await create_tables(session_factory)
            await seed_catalog(session_factory)

            yield session_factory

            await engine.dispose()

    @pytest.mark.asyncio
    async def test_seed_is_idempotent(self, session_factory):
        assert await seed_catalog(session_factory) == 0

    @pytest.mark.asyncio
    async def test_count_and_list(self, session_factory):
        repository = SQLAlchemyCatalogItemRepository(session_factory)
        brand_filter = CatalogFilter(brand_id=2)

        total = await repository.count(brand_filter)
        page = await repository.list(CatalogPageWindow(filter=brand_filter, skip=2, take=3))

        assert total == 6
        assert [item.id for item in page] == [4, 6, 10]
        assert all(item.catalog_brand_id == 2 for item in page)

    @pytest.mark.asyncio
    async def test_count_without_filter(self, session_factory):
        repository = SQLAlchemyCatalogItemRepository(session_factory)

        assert await repository.count(CatalogFilter()) == 12

    @pytest.mark.asyncio
    async def test_get_by_id(self, session_factory):
        repository = SQLAlchemyCatalogItemRepository(session_factory)

        item = await repository.get_by_id(1)

        assert item is not None
        assert item.name == ".NET Bot Black Sweatshirt"
        assert await repository.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_lookups(self, session_factory):
        repository = SQLAlchemyCatalogLookupRepository(session_factory)

        assert len(await repository.list_brands()) == 5
        assert len(await repository.list_types()) == 4
