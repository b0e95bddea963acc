from catalog_api.applications.interfaces.dtos.catalog_item import GetCatalogItemResponse
from catalog_api.applications.services.catalog_dto_mapper import CatalogDtoMapper
from catalog_api.domain.exceptions import NotFoundError
from catalog_api.domain.ports.repositories.catalog_item_repository import CatalogItemRepository
from catalog_api.domain.ports.services.uri_composer import UriComposer


class GetCatalogItemUseCase:
    def __init__(
        self,
        catalog_item_repository: CatalogItemRepository,
        dto_mapper: CatalogDtoMapper,
        uri_composer: UriComposer,
    ):
        self.catalog_item_repository = catalog_item_repository
        self.dto_mapper = dto_mapper
        self.uri_composer = uri_composer

    async def execute(self, item_id: int, correlation_id: str) -> GetCatalogItemResponse:
        item = await self.catalog_item_repository.get_by_id(item_id)
        if not item:
            raise NotFoundError(f"Catalog item with id {item_id} not found")

        item_public = self.dto_mapper.to_catalog_item_public(item)
        item_public.picture_uri = self.uri_composer.compose_pic_uri(item_public.picture_uri)

        return GetCatalogItemResponse(correlation_id=correlation_id, catalog_item=item_public)
