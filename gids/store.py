"""Remote data store access for Nederlandse Gids."""

import logging
from datetime import datetime
from typing import Any, Optional, Protocol

import requests

from .models import Article, Category

log = logging.getLogger("gids.store")


class DataStore(Protocol):
    """Read contract of the data store the browser loads from.

    Implementations signal every fetch failure with StoreError; loaders
    swallow nothing else.
    """

    def list_categories(self) -> list[Category]:
        """Return all categories in display order.

        Raises:
            StoreError: If the categories cannot be fetched
        """
        ...

    def list_articles(self) -> list[Article]:
        """Return all articles, newest first.

        Raises:
            StoreError: If the articles cannot be fetched
        """
        ...


class SupabaseStore:
    """Supabase (PostgREST) client for the categories and articles tables."""

    def __init__(self, url: str, api_key: str, timeout: float = 30):
        """Initialize the store.

        Args:
            url: Project URL, e.g. https://xyz.supabase.co
            api_key: Anonymous API key
            timeout: Request timeout in seconds
        """
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def list_categories(self) -> list[Category]:
        """Fetch all categories in the order the store returns them.

        Raises:
            StoreError: If the categories cannot be fetched or parsed
        """
        rows = self._select("categories")
        return [self._row_to_category(row) for row in rows]

    def list_articles(self) -> list[Article]:
        """Fetch all articles, newest first.

        Raises:
            StoreError: If the articles cannot be fetched or parsed
        """
        rows = self._select("articles", order="created_at.desc")
        return [self._row_to_article(row) for row in rows]

    def _select(self, table: str, order: Optional[str] = None) -> list[dict[str, Any]]:
        """Run a select-all query against a table.

        Args:
            table: Table name
            order: Optional PostgREST order expression

        Returns:
            List of row dicts
        """
        params = {"select": "*"}
        if order:
            params["order"] = order

        log.debug("Fetching %s from %s", table, self.url)
        try:
            response = requests.get(
                f"{self.url}/rest/v1/{table}",
                params=params,
                headers={
                    "apikey": self.api_key,
                    "Authorization": f"Bearer {self.api_key}",
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise StoreError(f"Failed to fetch {table}: {e}") from e

        try:
            rows = response.json()
        except ValueError as e:
            raise StoreError(f"Invalid JSON in {table} response: {e}") from e

        if not isinstance(rows, list):
            raise StoreError(f"Unexpected {table} payload: expected a list")

        return rows

    def _row_to_category(self, row: dict[str, Any]) -> Category:
        """Convert a categories row to a Category object."""
        try:
            category_id = row["id"]
            name = row["name"]
        except (KeyError, TypeError) as e:
            raise StoreError(f"Malformed category record: {row!r}") from e

        subcategories = row.get("subcategories")
        if not isinstance(subcategories, list):
            subcategories = None

        return Category(
            id=str(category_id),
            name=str(name),
            subcategories=tuple(str(s) for s in subcategories) if subcategories is not None else None,
        )

    def _row_to_article(self, row: dict[str, Any]) -> Article:
        """Convert an articles row to an Article object."""
        try:
            article_id = row["id"]
            title = row["title"]
            raw_created_at = row["created_at"]
        except (KeyError, TypeError) as e:
            raise StoreError(f"Malformed article record: {row!r}") from e

        created_at = self._parse_datetime(raw_created_at)
        if created_at is None:
            raise StoreError(f"Invalid created_at for article {article_id}: {raw_created_at!r}")

        return Article(
            id=str(article_id),
            title=str(title),
            excerpt=row.get("excerpt") or "",
            content=row.get("content") or "",
            author=row.get("author") or "",
            category=row.get("category") or "",
            read_time=str(row.get("read_time") or ""),
            created_at=created_at,
            image_url=row.get("image_url") or None,
        )

    @staticmethod
    def _parse_datetime(value: Any) -> Optional[datetime]:
        """Parse an ISO 8601 timestamp as returned by PostgREST."""
        if not isinstance(value, str):
            return None
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None


class StoreError(Exception):
    """Raised when a collection cannot be fetched from the data store."""

    pass
