from functools import lru_cache
from typing import Annotated, Tuple

from fastapi import Depends

from catalog_api.applications.services.catalog_dto_mapper import CatalogDtoMapper
from catalog_api.domain.ports.repositories.catalog_item_repository import CatalogItemRepository
from catalog_api.domain.ports.repositories.catalog_lookup_repository import CatalogLookupRepository
from catalog_api.domain.ports.services.logger import LoggerPort
from catalog_api.domain.ports.services.uri_composer import UriComposer
from catalog_api.infrastructure.adapters.repositories.in_memory_catalog_repository import (
    InMemoryCatalogItemRepository,
    InMemoryCatalogLookupRepository,
)
from catalog_api.infrastructure.adapters.repositories.sqlalchemy_catalog_item_repository import (
    SQLAlchemyCatalogItemRepository,
)
from catalog_api.infrastructure.adapters.repositories.sqlalchemy_catalog_lookup_repository import (
    SQLAlchemyCatalogLookupRepository,
)
from catalog_api.infrastructure.adapters.services.catalog_uri_composer import CatalogUriComposer
from catalog_api.infrastructure.config.settings import Settings
from catalog_api.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from catalog_api.infrastructure.persistence.database import get_session_factory
from catalog_api.infrastructure.persistence.seed import default_brands, default_items, default_types


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("catalog_api.catalog_items")


def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def _in_memory_catalog() -> Tuple[InMemoryCatalogItemRepository, InMemoryCatalogLookupRepository]:
    return (
        InMemoryCatalogItemRepository(default_items()),
        InMemoryCatalogLookupRepository(default_brands(), default_types()),
    )


def get_catalog_item_repository(settings: Annotated[Settings, Depends(get_settings)]) -> CatalogItemRepository:
    if settings.USE_ONLY_IN_MEMORY_DATABASE:
        return _in_memory_catalog()[0]
    return SQLAlchemyCatalogItemRepository(get_session_factory())


def get_catalog_lookup_repository(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CatalogLookupRepository:
    if settings.USE_ONLY_IN_MEMORY_DATABASE:
        return _in_memory_catalog()[1]
    return SQLAlchemyCatalogLookupRepository(get_session_factory())


def get_uri_composer(settings: Annotated[Settings, Depends(get_settings)]) -> UriComposer:
    return CatalogUriComposer(settings.CATALOG_BASE_URL)


def get_dto_mapper() -> CatalogDtoMapper:
    return CatalogDtoMapper()
