"""Minimal Notion REST client for querying the catalog databases."""

import httpx
from loguru import logger

from kahu_studio.config import (
    NOTION_API_BASE,
    NOTION_API_KEY,
    NOTION_PAGE_SIZE,
    NOTION_TIMEOUT,
    NOTION_VERSION,
)


class NotionClient:
    """Queries Notion databases over HTTPS, following pagination cursors."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = NOTION_API_BASE,
        version: str = NOTION_VERSION,
        timeout: float = NOTION_TIMEOUT,
    ) -> None:
        self.api_key = NOTION_API_KEY if api_key is None else api_key
        self.base_url = base_url.rstrip("/")
        self.version = version
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Notion-Version": self.version,
            "Content-Type": "application/json",
        }

    def query_database(
        self,
        database_id: str,
        query_filter: dict | None = None,
        sorts: list[dict] | None = None,
    ) -> list[dict]:
        """Return every page matching *query_filter*.

        Raises:
            httpx.HTTPError: on transport failure or a non-2xx answer.
        """
        url = f"{self.base_url}/databases/{database_id}/query"
        payload: dict = {"page_size": NOTION_PAGE_SIZE}
        if query_filter:
            payload["filter"] = query_filter
        if sorts:
            payload["sorts"] = sorts

        results: list[dict] = []
        while True:
            resp = httpx.post(url, json=payload, headers=self._headers(), timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
            results.extend(data.get("results", []))
            if not data.get("has_more") or not data.get("next_cursor"):
                break
            payload["start_cursor"] = data["next_cursor"]

        logger.debug("Notion database {} returned {} pages", database_id, len(results))
        return results
