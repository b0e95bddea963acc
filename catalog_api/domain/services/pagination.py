from typing import Optional, Tuple

from catalog_api.domain.exceptions import ValidationError
from catalog_api.domain.models.catalog_specification import CatalogFilter, CatalogPageWindow

# Page size used when the caller does not send one.
DEFAULT_PAGE_SIZE = 10

# Largest offset or page size a window may use (32-bit signed SQL OFFSET/LIMIT).
MAX_WINDOW_OFFSET = 2**31 - 1


def build_catalog_specifications(
    page_index: int,
    page_size: int,
    brand_id: Optional[int] = None,
    type_id: Optional[int] = None,
) -> Tuple[CatalogFilter, CatalogPageWindow]:
    """Translate page parameters into a count filter and a list window.

    The filter ids are taken verbatim: an id that does not exist simply
    matches no rows. A page size of zero yields an empty window
    (``skip=0, take=0``), so the list query returns nothing.

    Raises:
        ValidationError: negative index/size, or a size or offset beyond ``MAX_WINDOW_OFFSET``.
    """
    if page_index < 0:
        raise ValidationError(f"pageIndex must be >= 0, got {page_index}")
    if page_size < 0:
        raise ValidationError(f"pageSize must be >= 0, got {page_size}")
    if page_size > MAX_WINDOW_OFFSET:
        raise ValidationError(f"pageSize ({page_size}) exceeds the maximum page size {MAX_WINDOW_OFFSET}")

    skip = page_index * page_size
    if skip > MAX_WINDOW_OFFSET:
        raise ValidationError(
            f"pageIndex * pageSize ({page_index} * {page_size}) exceeds the maximum offset {MAX_WINDOW_OFFSET}"
        )

    catalog_filter = CatalogFilter(brand_id=brand_id, type_id=type_id)
    window = CatalogPageWindow(filter=catalog_filter, skip=skip, take=page_size)
    return catalog_filter, window


def compute_page_count(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` items.

    A page size of zero reports a single page whenever there is at least one
    item, and zero pages otherwise.
    """
    if page_size > 0:
        return (total_count + page_size - 1) // page_size
    return 1 if total_count > 0 else 0
