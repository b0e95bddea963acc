from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog_api.app import app
from catalog_api.applications.services.catalog_dto_mapper import CatalogDtoMapper
from catalog_api.domain.ports.repositories.catalog_item_repository import CatalogItemRepository
from catalog_api.domain.ports.services.logger import LoggerPort
from catalog_api.infrastructure.adapters.services.catalog_uri_composer import CatalogUriComposer
from catalog_api.infrastructure.config.dependencies import get_logger, get_settings
from catalog_api.infrastructure.config.settings import Settings

TEST_CATALOG_BASE_URL = "http://catalog.test"


@pytest.fixture
def mock_catalog_item_repository():
    """Mock catalog item repository for use case testing"""
    return AsyncMock(spec=CatalogItemRepository)


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def uri_composer():
    return CatalogUriComposer(TEST_CATALOG_BASE_URL)


@pytest.fixture
def dto_mapper():
    return CatalogDtoMapper()


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        USE_ONLY_IN_MEMORY_DATABASE=True,
        CATALOG_BASE_URL=TEST_CATALOG_BASE_URL,
        DEFAULT_PAGE_SIZE=10,
    )


@pytest_asyncio.fixture
async def client(test_settings, mock_logger):
    """HTTP client against the app wired to the seeded in-memory catalog"""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_logger] = lambda: mock_logger

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
