"""Tests for HTMX partial endpoints and health check."""

from kahu_studio.models.enums import ProductFilter


class TestHealthEndpoint:
    def test_health_returns_ok(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["notion_configured"] is True
        assert data["locales"] == ["fr", "en"]


class TestProductsPartial:
    def test_default_filter(self, client, mock_content_service):
        resp = client.get("/api/products")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        mock_content_service.get_filtered_products.assert_awaited_with(ProductFilter.ALL)

    def test_capsule_filter(self, client, mock_content_service):
        resp = client.get("/api/products?filter=capsule&lang=en")
        assert resp.status_code == 200
        mock_content_service.get_filtered_products.assert_awaited_with(ProductFilter.CAPSULE)
        assert 'href="/en/objet/table-iroko"' in resp.text

    def test_invalid_filter_returns_404(self, client):
        resp = client.get("/api/products?filter=soldes")
        assert resp.status_code == 404

    def test_invalid_lang_uses_default(self, client):
        resp = client.get("/api/products?lang=de")
        assert resp.status_code == 200
        assert 'href="/fr/objet/' in resp.text

    def test_empty_state(self, client, mock_content_service):
        mock_content_service.get_filtered_products.return_value = []
        resp = client.get("/api/products?filter=flash&lang=en")
        assert resp.status_code == 200
        assert "empty-state" in resp.text

    def test_partial_not_wrapped_in_layout(self, client):
        assert "<html" not in client.get("/api/products").text

    def test_no_locale_cookie_on_api(self, client):
        resp = client.get("/api/products")
        assert "set-cookie" not in resp.headers
