import pytest

from catalog_api.infrastructure.adapters.services.catalog_uri_composer import CatalogUriComposer


class TestCatalogUriComposer:
    @pytest.fixture
    def composer(self):
        return CatalogUriComposer("https://cdn.example.com/")

    def test_replaces_placeholder_host(self, composer):
        uri = composer.compose_pic_uri("http://catalogbaseurltobereplaced/images/products/1.png")

        assert uri == "https://cdn.example.com/images/products/1.png"

    def test_absolute_uri_left_unchanged(self, composer):
        uri = "https://elsewhere.example.com/pic.png"

        assert composer.compose_pic_uri(uri) == uri

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_values_returned_as_is(self, composer, value):
        assert composer.compose_pic_uri(value) == value
