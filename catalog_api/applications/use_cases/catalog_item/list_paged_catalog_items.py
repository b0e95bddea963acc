import asyncio
import sys
import traceback
from typing import List, Tuple

from catalog_api.applications.interfaces.dtos.catalog_item import (
    ListPagedCatalogItemRequest,
    ListPagedCatalogItemResponse,
)
from catalog_api.applications.services.catalog_dto_mapper import CatalogDtoMapper
from catalog_api.domain.models.catalog_item import CatalogItem
from catalog_api.domain.models.catalog_specification import CatalogFilter, CatalogPageWindow
from catalog_api.domain.ports.repositories.read_repository import ReadRepository
from catalog_api.domain.ports.services.logger import LoggerPort
from catalog_api.domain.ports.services.uri_composer import UriComposer
from catalog_api.domain.services.pagination import build_catalog_specifications, compute_page_count


class ListPagedCatalogItemsUseCase:
    """List one page of catalog items together with the total page count.

    Count and list run concurrently. A failure in either one, or caller
    cancellation, cancels the other and propagates unchanged; nothing is
    logged in that case.
    """

    def __init__(
        self,
        catalog_item_repository: ReadRepository[CatalogItem],
        dto_mapper: CatalogDtoMapper,
        uri_composer: UriComposer,
        logger: LoggerPort,
    ):
        self.catalog_item_repository = catalog_item_repository
        self.dto_mapper = dto_mapper
        self.uri_composer = uri_composer
        self.logger = logger

    async def execute(self, request: ListPagedCatalogItemRequest) -> ListPagedCatalogItemResponse:
        catalog_filter, window = build_catalog_specifications(
            page_index=request.page_index,
            page_size=request.page_size,
            brand_id=request.catalog_brand_id,
            type_id=request.catalog_type_id,
        )

        total_count, items = await self._count_and_list(catalog_filter, window)

        response = self.assemble(request, total_count, items)
        self._log_outcome(request, len(response.catalog_items))
        return response

    async def _count_and_list(
        self, catalog_filter: CatalogFilter, window: CatalogPageWindow
    ) -> Tuple[int, List[CatalogItem]]:
        count_task = asyncio.ensure_future(self.catalog_item_repository.count(catalog_filter))
        list_task = asyncio.ensure_future(self.catalog_item_repository.list(window))
        try:
            total_count, items = await asyncio.gather(count_task, list_task)
        except BaseException:
            count_task.cancel()
            list_task.cancel()
            await asyncio.gather(count_task, list_task, return_exceptions=True)
            raise
        return total_count, items

    def assemble(
        self, request: ListPagedCatalogItemRequest, total_count: int, items: List[CatalogItem]
    ) -> ListPagedCatalogItemResponse:
        catalog_items = []
        for item in items:
            item_public = self.dto_mapper.to_catalog_item_public(item)
            picture_uri = self.uri_composer.compose_pic_uri(item_public.picture_uri)
            catalog_items.append(item_public.model_copy(update={"picture_uri": picture_uri}))

        return ListPagedCatalogItemResponse(
            correlation_id=request.correlation_id,
            catalog_items=catalog_items,
            page_count=compute_page_count(total_count, request.page_size),
        )

    def _log_outcome(self, request: ListPagedCatalogItemRequest, item_count: int) -> None:
        # The summary is best effort: a broken sink must not fail the request.
        try:
            self.logger.info(
                "CatalogItemListPaged returned %d items | page=%d size=%d brand=%s type=%s corr=%s",
                item_count,
                request.page_index,
                request.page_size,
                request.catalog_brand_id,
                request.catalog_type_id,
                request.correlation_id,
                extra={
                    "item_count": item_count,
                    "page_index": request.page_index,
                    "page_size": request.page_size,
                    "brand_id": request.catalog_brand_id,
                    "type_id": request.catalog_type_id,
                    "correlation_id": request.correlation_id,
                },
            )
        except Exception:
            traceback.print_exc(file=sys.stderr)
