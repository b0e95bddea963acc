from catalog_api.applications.interfaces.dtos.catalog_item import CatalogItemPublic
from catalog_api.applications.interfaces.dtos.catalog_lookup import CatalogBrandPublic, CatalogTypePublic
from catalog_api.domain.models.catalog_item import CatalogItem
from catalog_api.domain.models.catalog_lookup import CatalogBrand, CatalogType


class CatalogDtoMapper:
    """Service for mapping catalog domain models to DTOs"""

    @staticmethod
    def to_catalog_item_public(item: CatalogItem) -> CatalogItemPublic:
        """Convert domain CatalogItem to its public view (picture URI left as stored)"""
        return CatalogItemPublic(
            id=item.id,
            name=item.name,
            description=item.description,
            price=float(item.price),
            picture_uri=item.picture_uri,
            catalog_brand_id=item.catalog_brand_id,
            catalog_type_id=item.catalog_type_id,
        )

    @staticmethod
    def to_catalog_brand_public(brand: CatalogBrand) -> CatalogBrandPublic:
        return CatalogBrandPublic(id=brand.id, name=brand.brand)

    @staticmethod
    def to_catalog_type_public(catalog_type: CatalogType) -> CatalogTypePublic:
        return CatalogTypePublic(id=catalog_type.id, name=catalog_type.type)
