"""
Tests for the bundled static assets
"""
import config
from ui.assets import RESOURCE_HANDLERS, resolve_asset


class TestCustomAssets:
    """Test /custom/**"""

    def test_page_served_with_file_bytes(self, client):
        response = client.get("/custom/swagger-ui-page.html")
        assert response.status_code == 200
        assert response.content == (config.CUSTOM_ASSETS_DIR / "swagger-ui-page.html").read_bytes()

    def test_initializer_served(self, client):
        response = client.get("/custom/swagger-initializer.js")
        assert response.status_code == 200
        assert response.content == (config.CUSTOM_ASSETS_DIR / "swagger-initializer.js").read_bytes()

    def test_missing_file(self, client):
        response = client.get("/custom/does-not-exist.html")
        assert response.status_code == 404

    def test_missing_file_renders_error_page(self, client):
        """Browser paths get the error.html template, not JSON"""
        response = client.get("/custom/does-not-exist.html")
        assert response.headers["content-type"].startswith("text/html")
        assert "404" in response.text
        assert "Back to API documentation" in response.text

    def test_no_directory_listing(self, client):
        assert client.get("/custom/").status_code == 404


class TestSwaggerUiAssets:
    """Test /swagger-ui/** library assets"""

    def test_bundle_served(self, client):
        response = client.get("/swagger-ui/swagger-ui-bundle.js")
        assert response.status_code == 200
        assert response.content == (config.SWAGGER_UI_ASSETS_DIR / "swagger-ui-bundle.js").read_bytes()

    def test_stylesheet_served(self, client):
        response = client.get("/swagger-ui/swagger-ui.css")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    def test_page_loads_library_from_vendor_path(self):
        page = (config.CUSTOM_ASSETS_DIR / "swagger-ui-page.html").read_text()
        assert 'src="/swagger-ui/swagger-ui-bundle.js"' in page
        assert "unpkg.com" not in page

    def test_missing_file(self, client):
        response = client.get("/swagger-ui/swagger-ui-missing.js")
        assert response.status_code == 404
        assert "Back to API documentation" in response.text


class TestResolveAsset:
    """Test mapping URL paths onto resource handler directories"""

    def test_handlers(self):
        assert [handler.path for handler in RESOURCE_HANDLERS] == ["/custom", "/swagger-ui"]

    def test_resolves_existing_file(self):
        assert resolve_asset("/custom/swagger-ui-page.html") == (
            config.CUSTOM_ASSETS_DIR / "swagger-ui-page.html"
        ).resolve()

    def test_unknown_prefix(self):
        assert resolve_asset("/other/swagger-ui-page.html") is None

    def test_missing_file(self):
        assert resolve_asset("/custom/nope.html") is None

    def test_stays_inside_directory(self):
        assert resolve_asset("/custom/../../../config.py") is None
