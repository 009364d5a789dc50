"""Content service: read-only catalog access over the Notion databases.

Every public method is async and never raises for upstream failures:
HTTP errors and malformed payloads are logged and an empty fallback
(``[]`` or ``None``) is returned so pages can render an empty state.
"""

import asyncio
from collections.abc import Callable
from typing import TypeVar

import httpx
from loguru import logger

from kahu_studio.config import NOTION_PRODUCTS_DB, NOTION_PROJECTS_DB
from kahu_studio.models.content import Product, Project
from kahu_studio.models.enums import ProductCategory, ProductFilter, ProductStatus
from kahu_studio.services.content_cache import ContentCache
from kahu_studio.services.notion_parser import parse_product, parse_project
from kahu_studio.services.notion_service import NotionClient

T = TypeVar("T")

_NOT_DRAFT = {"property": "Statut", "select": {"does_not_equal": ProductStatus.DRAFT.value}}
_VISIBLE = {"property": "Visible", "checkbox": {"equals": True}}


def sort_products(products: list[Product]) -> list[Product]:
    """Flash sales first, then by manual order."""
    return sorted(products, key=lambda p: (not p.vente_flash, p.ordre))


def sort_projects(projects: list[Project]) -> list[Project]:
    """Most recent year first; undated projects last."""
    return sorted(projects, key=lambda p: p.annee or 0, reverse=True)


class ContentService:
    """Async facade over :class:`NotionClient` with TTL caching."""

    def __init__(
        self,
        client: NotionClient | None = None,
        products_db: str = NOTION_PRODUCTS_DB,
        projects_db: str = NOTION_PROJECTS_DB,
        cache: ContentCache | None = None,
    ) -> None:
        self.client = client or NotionClient()
        self.products_db = products_db
        self.projects_db = projects_db
        self.cache = cache or ContentCache()

    def is_configured(self) -> bool:
        return self.client.is_configured() and bool(self.products_db and self.projects_db)

    async def _safe_query(self, key: str, fetch: Callable[[], T], fallback: T) -> T:
        if not self.is_configured():
            logger.warning("Notion not configured, skipping query {}", key)
            return fallback
        try:
            return await asyncio.to_thread(self.cache.get_or_compute, key, fetch)
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.error("Notion API error for {}: {}", key, exc)
            return fallback

    def _fetch_products(self, query_filter: dict) -> list[Product]:
        pages = self.client.query_database(self.products_db, query_filter=query_filter)
        return [parse_product(page) for page in pages]

    def _fetch_projects(self, query_filter: dict) -> list[Project]:
        pages = self.client.query_database(self.projects_db, query_filter=query_filter)
        return [parse_project(page) for page in pages]

    # ── Products ─────────────────────────────────────────────────────────

    async def get_products(self) -> list[Product]:
        """All non-draft products, flash sales first."""
        return await self._safe_query(
            "products:all",
            lambda: sort_products(self._fetch_products(_NOT_DRAFT)),
            [],
        )

    async def get_products_by_category(self, category: ProductCategory) -> list[Product]:
        query_filter = {
            "and": [
                _NOT_DRAFT,
                {"property": "Categorie", "select": {"equals": ProductCategory(category).value}},
            ]
        }
        return await self._safe_query(
            f"products:category:{category}",
            lambda: sort_products(self._fetch_products(query_filter)),
            [],
        )

    async def get_flash_sale_products(self) -> list[Product]:
        """Available products whose flash sale has not expired."""
        query_filter = {
            "and": [
                {"property": "Statut", "select": {"equals": ProductStatus.AVAILABLE.value}},
                {"property": "Vente Flash", "checkbox": {"equals": True}},
            ]
        }
        return await self._safe_query(
            "products:flash",
            lambda: sorted(
                (p for p in self._fetch_products(query_filter) if p.vente_flash),
                key=lambda p: p.ordre,
            ),
            [],
        )

    async def get_product_by_slug(self, slug: str) -> Product | None:
        query_filter = {"property": "Slug", "rich_text": {"equals": slug}}

        def fetch() -> Product | None:
            products = self._fetch_products(query_filter)
            return products[0] if products else None

        return await self._safe_query(f"products:slug:{slug}", fetch, None)

    async def get_featured_products(self, limit: int = 4) -> list[Product]:
        products = await self.get_products()
        return [p for p in products if p.is_available][:limit]

    async def get_similar_products(
        self, current_slug: str, category: ProductCategory, limit: int = 4
    ) -> list[Product]:
        """Available products of the same category, excluding the current one."""
        products = await self.get_products_by_category(category)
        return [p for p in products if p.slug != current_slug and p.is_available][:limit]

    async def has_active_flash_sale(self) -> bool:
        return bool(await self.get_flash_sale_products())

    async def get_filtered_products(self, product_filter: ProductFilter) -> list[Product]:
        """Products for the catalog grid filters."""
        if product_filter == ProductFilter.CAPSULE:
            return await self.get_products_by_category(ProductCategory.CAPSULE)
        if product_filter == ProductFilter.FURNITURE:
            return await self.get_products_by_category(ProductCategory.FURNITURE)
        if product_filter == ProductFilter.FLASH:
            return await self.get_flash_sale_products()
        return await self.get_products()

    # ── Projects ─────────────────────────────────────────────────────────

    async def get_projects(self) -> list[Project]:
        """Visible projects, most recent first."""
        return await self._safe_query(
            "projects:all",
            lambda: sort_projects(self._fetch_projects(_VISIBLE)),
            [],
        )

    async def get_project_by_slug(self, slug: str) -> Project | None:
        query_filter = {
            "and": [
                {"property": "Slug", "rich_text": {"equals": slug}},
                _VISIBLE,
            ]
        }

        def fetch() -> Project | None:
            projects = self._fetch_projects(query_filter)
            return projects[0] if projects else None

        return await self._safe_query(f"projects:slug:{slug}", fetch, None)

    async def get_projects_by_year(self, year: int) -> list[Project]:
        query_filter = {
            "and": [
                _VISIBLE,
                {"property": "Annee", "number": {"equals": year}},
            ]
        }
        return await self._safe_query(
            f"projects:year:{year}", lambda: self._fetch_projects(query_filter), []
        )

    async def get_project_years(self) -> list[int]:
        projects = await self.get_projects()
        return sorted({p.annee for p in projects if p.annee}, reverse=True)
