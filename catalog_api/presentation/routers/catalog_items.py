import uuid
from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Path, Query, Response

from catalog_api.applications.interfaces.dtos.catalog_item import (
    GetCatalogItemResponse,
    ListPagedCatalogItemRequest,
    ListPagedCatalogItemResponse,
)
from catalog_api.applications.services.catalog_dto_mapper import CatalogDtoMapper
from catalog_api.applications.use_cases.catalog_item.get_catalog_item import GetCatalogItemUseCase
from catalog_api.applications.use_cases.catalog_item.list_paged_catalog_items import (
    ListPagedCatalogItemsUseCase,
)
from catalog_api.domain.exceptions import NotFoundError, StoreUnavailableError, ValidationError
from catalog_api.domain.ports.repositories.catalog_item_repository import CatalogItemRepository
from catalog_api.domain.ports.services.logger import LoggerPort
from catalog_api.domain.ports.services.uri_composer import UriComposer
from catalog_api.infrastructure.config.dependencies import (
    get_catalog_item_repository,
    get_dto_mapper,
    get_logger,
    get_settings,
    get_uri_composer,
)
from catalog_api.infrastructure.config.settings import Settings
from catalog_api.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/api/catalog-items", tags=["catalog-items"])

CORRELATION_HEADER = "X-Correlation-ID"

CatalogItemRepositoryDep = Annotated[CatalogItemRepository, Depends(get_catalog_item_repository)]
DtoMapperDep = Annotated[CatalogDtoMapper, Depends(get_dto_mapper)]
UriComposerDep = Annotated[UriComposer, Depends(get_uri_composer)]
LoggerDep = Annotated[LoggerPort, Depends(get_logger)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
CorrelationIdHeader = Annotated[Optional[str], Header(alias=CORRELATION_HEADER)]


@router.get("", response_model=ListPagedCatalogItemResponse)
async def list_paged_catalog_items(
    response: Response,
    catalog_item_repository: CatalogItemRepositoryDep,
    dto_mapper: DtoMapperDep,
    uri_composer: UriComposerDep,
    catalog_logger: LoggerDep,
    settings: SettingsDep,
    page_index: Annotated[int, Query(alias="pageIndex")] = 0,
    page_size: Annotated[Optional[int], Query(alias="pageSize")] = None,
    catalog_brand_id: Annotated[Optional[int], Query(alias="catalogBrandId")] = None,
    catalog_type_id: Annotated[Optional[int], Query(alias="catalogTypeId")] = None,
    correlation_id: CorrelationIdHeader = None,
):
    """List catalog items (paged)"""
    request = ListPagedCatalogItemRequest(
        page_index=page_index,
        page_size=settings.DEFAULT_PAGE_SIZE if page_size is None else page_size,
        catalog_brand_id=catalog_brand_id,
        catalog_type_id=catalog_type_id,
        correlation_id=correlation_id or uuid.uuid4().hex,
    )
    response.headers[CORRELATION_HEADER] = request.correlation_id

    try:
        use_case = ListPagedCatalogItemsUseCase(
            catalog_item_repository=catalog_item_repository,
            dto_mapper=dto_mapper,
            uri_composer=uri_composer,
            logger=catalog_logger,
        )
        return await use_case.execute(request)
    except ValidationError as e:
        logger.warning(f"Bad request listing catalog items: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    except StoreUnavailableError:
        logger.exception(f"Catalog store unavailable (corr={request.correlation_id})")
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail="Catalog store unavailable")
    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Unhandled error listing catalog items (corr={request.correlation_id})")
        raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="Internal server error")


@router.get("/{catalog_item_id}", response_model=GetCatalogItemResponse)
async def get_catalog_item(
    response: Response,
    catalog_item_repository: CatalogItemRepositoryDep,
    dto_mapper: DtoMapperDep,
    uri_composer: UriComposerDep,
    catalog_item_id: Annotated[int, Path(ge=1)],
    correlation_id: CorrelationIdHeader = None,
):
    """Get a catalog item by id"""
    correlation_id = correlation_id or uuid.uuid4().hex
    response.headers[CORRELATION_HEADER] = correlation_id

    try:
        use_case = GetCatalogItemUseCase(catalog_item_repository, dto_mapper, uri_composer)
        return await use_case.execute(catalog_item_id, correlation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
    except StoreUnavailableError:
        logger.exception(f"Catalog store unavailable (corr={correlation_id})")
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail="Catalog store unavailable")
