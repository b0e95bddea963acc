from catalog_api.applications.interfaces.dtos.catalog_lookup import CatalogBrandList
from catalog_api.applications.services.catalog_dto_mapper import CatalogDtoMapper
from catalog_api.domain.ports.repositories.catalog_lookup_repository import CatalogLookupRepository


class ListCatalogBrandsUseCase:
    def __init__(self, catalog_lookup_repository: CatalogLookupRepository, dto_mapper: CatalogDtoMapper):
        self.catalog_lookup_repository = catalog_lookup_repository
        self.dto_mapper = dto_mapper

    async def execute(self) -> CatalogBrandList:
        brands = await self.catalog_lookup_repository.list_brands()
        return CatalogBrandList(catalog_brands=[self.dto_mapper.to_catalog_brand_public(b) for b in brands])
