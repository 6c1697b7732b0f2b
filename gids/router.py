"""Screen navigation for Nederlandse Gids."""

from enum import Enum
from typing import Optional

from .models import Article
from .observable import Observable


class Screen(Enum):
    """The screens the browser can show."""

    HOME = "home"
    DETAIL = "detail"


class InvalidSelectionError(ValueError):
    """Raised when selecting something that is not an article."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Cannot select {value!r}: not an article")


class ViewRouter(Observable):
    """Two-state machine holding the active screen and the selected article.

    The detail screen is shown exactly while an article is selected.
    """

    def __init__(self):
        super().__init__()
        self._screen = Screen.HOME
        self._selected: Optional[Article] = None

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def selected(self) -> Optional[Article]:
        return self._selected

    def select_article(self, article: Article) -> None:
        """Show the detail screen for an already loaded article.

        Args:
            article: The article to show

        Raises:
            InvalidSelectionError: If article is None or not an Article
        """
        if not isinstance(article, Article):
            raise InvalidSelectionError(article)

        self._selected = article
        self._screen = Screen.DETAIL
        self._notify()

    def go_back(self) -> None:
        """Clear the selection and return to the home screen."""
        if self._screen is Screen.HOME and self._selected is None:
            return

        self._selected = None
        self._screen = Screen.HOME
        self._notify()
