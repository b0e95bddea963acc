from catalog_api.applications.interfaces.dtos.catalog_lookup import CatalogTypeList
from catalog_api.applications.services.catalog_dto_mapper import CatalogDtoMapper
from catalog_api.domain.ports.repositories.catalog_lookup_repository import CatalogLookupRepository


class ListCatalogTypesUseCase:
    def __init__(self, catalog_lookup_repository: CatalogLookupRepository, dto_mapper: CatalogDtoMapper):
        self.catalog_lookup_repository = catalog_lookup_repository
        self.dto_mapper = dto_mapper

    async def execute(self) -> CatalogTypeList:
        catalog_types = await self.catalog_lookup_repository.list_types()
        return CatalogTypeList(catalog_types=[self.dto_mapper.to_catalog_type_public(t) for t in catalog_types])
