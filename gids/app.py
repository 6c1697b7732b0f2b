"""Application composition for Nederlandse Gids."""

import asyncio
import logging
from typing import Optional

from .loader import CollectionLoader
from .models import Article, Category
from .render import RULE, render_detail, render_header, render_home, render_sidebar
from .router import Screen, ViewRouter
from .shell import ShellState
from .store import DataStore

log = logging.getLogger("gids.app")


class ArticleNotFoundError(Exception):
    """Raised when an article is not part of the loaded articles."""

    def __init__(self, article_id: str):
        self.article_id = article_id
        super().__init__(f"Article '{article_id}' not found")


class BlogPlatform:
    """Wires the router, the shell toggles and both collection loaders."""

    def __init__(self, store: DataStore):
        """Initialize the platform.

        Args:
            store: Data store providing list_categories and list_articles
        """
        self.router = ViewRouter()
        self.shell = ShellState()
        self.categories: CollectionLoader[Category] = CollectionLoader(
            "categories", store.list_categories
        )
        self.articles: CollectionLoader[Article] = CollectionLoader(
            "articles", store.list_articles
        )

    async def mount(self) -> None:
        """Activate both loaders; they complete in any order."""
        await asyncio.gather(self.categories.activate(), self.articles.activate())

    def unmount(self) -> None:
        """Deactivate both loaders so late results are dropped."""
        self.categories.deactivate()
        self.articles.deactivate()

    def find_article(self, article_id: str) -> Optional[Article]:
        """Look up an article in the loaded snapshot by id."""
        for article in self.articles.snapshot():
            if article.id == article_id:
                return article
        return None

    def click_card(self, article: Article) -> None:
        """Open the detail screen for a card on the home screen.

        Raises:
            ArticleNotFoundError: If the article is not in the loaded snapshot
        """
        if article is None or article not in self.articles.snapshot():
            raise ArticleNotFoundError(getattr(article, "id", str(article)))

        log.debug("Selecting article %s", article.id)
        self.router.select_article(article)

    def open_article(self, article_id: str) -> Article:
        """Select a loaded article by id.

        Args:
            article_id: Id of an article in the loaded snapshot

        Returns:
            The selected article

        Raises:
            ArticleNotFoundError: If no loaded article has this id
        """
        article = self.find_article(article_id)
        if article is None:
            raise ArticleNotFoundError(article_id)

        self.click_card(article)
        return article

    def click_back(self) -> None:
        self.router.go_back()

    def click_menu(self) -> None:
        self.shell.toggle_menu()

    def click_theme(self) -> None:
        self.shell.toggle_theme()

    def render(self) -> str:
        """Render the full page for the current state."""
        parts = [render_header(self.shell.theme, self.shell.menu_open), RULE]

        if self.shell.menu_open:
            parts.append(render_sidebar(self.categories.snapshot()))
            parts.append(RULE)

        if self.router.screen is Screen.DETAIL:
            parts.append(render_detail(self.router.selected))
        else:
            parts.append(render_home(self.articles.snapshot()))

        return "\n".join(parts)
