from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Response

from catalog_api.applications.interfaces.dtos.health import HealthStatus
from catalog_api.domain.exceptions import ConfigurationError, RepositoryError
from catalog_api.domain.models.catalog_specification import CatalogFilter
from catalog_api.domain.ports.repositories.catalog_item_repository import CatalogItemRepository
from catalog_api.infrastructure.config.dependencies import get_catalog_item_repository, get_settings
from catalog_api.infrastructure.config.settings import Settings
from catalog_api.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(tags=["health"])


def get_checked_catalog_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Optional[CatalogItemRepository]:
    """Resolves the catalog store, or None when the store is not configured"""
    try:
        return get_catalog_item_repository(settings)
    except ConfigurationError as e:
        logger.warning(f"Catalog store is not configured: {e}")
        return None


def _unhealthy(response: Response) -> HealthStatus:
    response.status_code = HTTPStatus.SERVICE_UNAVAILABLE
    return HealthStatus(status="unhealthy", service="catalog-api", checks={"catalog_store": "unhealthy"})


@router.get("/health", response_model=HealthStatus)
async def health_check(
    response: Response,
    catalog_item_repository: Annotated[Optional[CatalogItemRepository], Depends(get_checked_catalog_store)],
):
    """Checks that the catalog store answers a count query"""
    if catalog_item_repository is None:
        return _unhealthy(response)

    try:
        await catalog_item_repository.count(CatalogFilter())
    except RepositoryError as e:
        logger.warning(f"Catalog store health check failed: {e}")
        return _unhealthy(response)

    return HealthStatus(status="healthy", service="catalog-api", checks={"catalog_store": "healthy"})
