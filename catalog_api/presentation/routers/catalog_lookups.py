from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from catalog_api.applications.interfaces.dtos.catalog_lookup import CatalogBrandList, CatalogTypeList
from catalog_api.applications.services.catalog_dto_mapper import CatalogDtoMapper
from catalog_api.applications.use_cases.catalog_lookup.list_catalog_brands import ListCatalogBrandsUseCase
from catalog_api.applications.use_cases.catalog_lookup.list_catalog_types import ListCatalogTypesUseCase
from catalog_api.domain.exceptions import StoreUnavailableError
from catalog_api.domain.ports.repositories.catalog_lookup_repository import CatalogLookupRepository
from catalog_api.infrastructure.config.dependencies import get_catalog_lookup_repository, get_dto_mapper

router = APIRouter(prefix="/api", tags=["catalog-lookups"])

CatalogLookupRepositoryDep = Annotated[CatalogLookupRepository, Depends(get_catalog_lookup_repository)]
DtoMapperDep = Annotated[CatalogDtoMapper, Depends(get_dto_mapper)]


@router.get("/catalog-brands", response_model=CatalogBrandList)
async def list_catalog_brands(catalog_lookup_repository: CatalogLookupRepositoryDep, dto_mapper: DtoMapperDep):
    try:
        return await ListCatalogBrandsUseCase(catalog_lookup_repository, dto_mapper).execute()
    except StoreUnavailableError:
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail="Catalog store unavailable")


@router.get("/catalog-types", response_model=CatalogTypeList)
async def list_catalog_types(catalog_lookup_repository: CatalogLookupRepositoryDep, dto_mapper: DtoMapperDep):
    try:
        return await ListCatalogTypesUseCase(catalog_lookup_repository, dto_mapper).execute()
    except StoreUnavailableError:
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail="Catalog store unavailable")
