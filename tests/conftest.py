"""Shared test fixtures."""

from contextlib import asynccontextmanager
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from kahu_studio.models.enums import ProductStatus
from kahu_studio.rate_limit import limiter
from kahu_studio.services.content_service import ContentService
from tests.fixtures.sample_data import make_product, make_project


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    """Reset rate limiter storage between tests to avoid 429s."""
    limiter.reset()


@pytest.fixture()
def sample_products():
    return [
        make_product("table-iroko", vente_flash=True),
        make_product("chaise-sipo", ordre=2),
        make_product("banc-bete", ordre=3, quantite=0, statut=ProductStatus.SOLD),
    ]


@pytest.fixture()
def mock_content_service(sample_products):
    """A ContentService-like mock returning synthetic catalog data (no Notion calls)."""
    svc = MagicMock(spec=ContentService)
    svc.is_configured.return_value = True
    svc.get_products.return_value = sample_products
    svc.get_products_by_category.return_value = sample_products[:2]
    svc.get_flash_sale_products.return_value = sample_products[:1]
    svc.get_filtered_products.return_value = sample_products
    svc.get_featured_products.return_value = sample_products[:2]
    svc.get_similar_products.return_value = sample_products[1:2]
    svc.has_active_flash_sale.return_value = True
    svc.get_product_by_slug.side_effect = lambda slug: next(
        (p for p in sample_products if p.slug == slug), None
    )
    projects = [make_project("villa-cocody"), make_project("bureau-plateau", annee=2023)]
    svc.get_projects.return_value = projects
    svc.get_project_years.return_value = [2024, 2023]
    svc.get_project_by_slug.side_effect = lambda slug: next(
        (p for p in projects if p.slug == slug), None
    )
    return svc


@pytest.fixture()
def client(mock_content_service):
    """FastAPI TestClient with a mocked ContentService (no real Notion queries)."""

    @asynccontextmanager
    async def _test_lifespan(app):
        app.state.content = mock_content_service
        yield

    from kahu_studio.main import app

    app.router.lifespan_context = _test_lifespan
    with TestClient(app) as c:
        yield c
