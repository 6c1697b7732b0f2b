"""Shared fixtures for Nederlandse Gids tests."""

from datetime import datetime

import pytest

from gids.models import Article, Category
from gids.store import StoreError


def make_article(article_id: str = "a1", **overrides) -> Article:
    """Build an article with sensible defaults."""
    fields = {
        "id": article_id,
        "title": "Voorbeeld",
        "excerpt": "Een korte samenvatting.",
        "content": "<p>Hallo</p>",
        "author": "Jan Jansen",
        "category": "Reizen",
        "read_time": "5 min",
        "created_at": datetime(2024, 6, 15, 12, 0, 0),
        "image_url": None,
    }
    fields.update(overrides)
    return Article(**fields)


class StubStore:
    """In-memory data store; a list value is returned, an exception raised."""

    def __init__(self, categories=None, articles=None):
        self.categories = categories if categories is not None else []
        self.articles = articles if articles is not None else []
        self.category_calls = 0
        self.article_calls = 0

    def list_categories(self) -> list[Category]:
        self.category_calls += 1
        if isinstance(self.categories, Exception):
            raise self.categories
        return list(self.categories)

    def list_articles(self) -> list[Article]:
        self.article_calls += 1
        if isinstance(self.articles, Exception):
            raise self.articles
        return list(self.articles)


@pytest.fixture
def articles() -> list[Article]:
    """Three articles ordered newest first."""
    return [
        make_article("a3", title="Derde", created_at=datetime(2024, 3, 3, 9, 0)),
        make_article("a2", title="Tweede", created_at=datetime(2024, 2, 2, 9, 0)),
        make_article("a1", title="Voorbeeld", created_at=datetime(2024, 1, 1, 9, 0)),
    ]


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category(id="1", name="Reizen", subcategories=("Steden", "Natuur")),
        Category(id="2", name="Cultuur"),
    ]


@pytest.fixture
def store(categories, articles) -> StubStore:
    return StubStore(categories=categories, articles=articles)


@pytest.fixture
def failing_store() -> StubStore:
    return StubStore(
        categories=StoreError("categories unavailable"),
        articles=StoreError("articles unavailable"),
    )
