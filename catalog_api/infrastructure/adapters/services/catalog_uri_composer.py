from typing import Optional

from catalog_api.domain.ports.services.uri_composer import UriComposer

CATALOG_BASE_URL_PLACEHOLDER = "http://catalogbaseurltobereplaced"


class CatalogUriComposer(UriComposer):
    """Swaps the placeholder host stored with catalog pictures for the configured base URL.

    Empty values and URIs without the placeholder are returned unchanged.
    """

    def __init__(self, catalog_base_url: str):
        self.catalog_base_url = catalog_base_url.rstrip("/")

    def compose_pic_uri(self, uri_template: Optional[str]) -> Optional[str]:
        if not uri_template:
            return uri_template
        return uri_template.replace(CATALOG_BASE_URL_PLACEHOLDER, self.catalog_base_url)
