"""Text and HTML rendering for Nederlandse Gids."""

import html
import re
from datetime import datetime
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from bs4 import BeautifulSoup

from .models import Article, Category
from .shell import Theme

APP_TITLE = "Nederlandse Gids"
PLACEHOLDER_IMAGE = "/api/placeholder/800/400"
DISPLAY_TIMEZONE = ZoneInfo("Europe/Amsterdam")
RULE = "-" * 60


def format_date(value: datetime, tz: ZoneInfo = DISPLAY_TIMEZONE) -> str:
    """Format a date the way Dutch short dates are written (e.g. 5-3-2024).

    Timezone-aware values are converted to Dutch local time first; naive
    values are taken as already local.
    """
    if value.tzinfo is not None:
        value = value.astimezone(tz)
    return f"{value.day}-{value.month}-{value.year}"


def image_or_placeholder(article: Article) -> str:
    """Return the article image, or the placeholder if it has none."""
    return article.image_url or PLACEHOLDER_IMAGE


def markup_to_text(markup: str) -> str:
    """Convert trusted article markup to plain text for the terminal."""
    text = BeautifulSoup(markup or "", "html.parser").get_text("\n")
    lines = [line.strip() for line in text.splitlines()]
    text = "\n".join(lines)
    return re.sub(r"\n{3,}", "\n\n", text).strip()


def render_header(theme: Theme, menu_open: bool) -> str:
    """Render the navigation bar.

    The search box and the language selector are shown but do nothing.
    """
    menu = "[x]" if menu_open else "[=]"
    theme_button = "[zon]" if theme is Theme.DARK else "[maan]"
    return f"{menu} {APP_TITLE}    [Zoeken...]  [NL v]  {theme_button}"


def render_sidebar(categories: Iterable[Category]) -> str:
    """Render the category menu."""
    lines = ["Categorieën"]
    for category in categories:
        lines.append("")
        lines.append(f"  {category.name}")
        for sub in category.subcategories or ():
            lines.append(f"    - {sub}")
    return "\n".join(lines)


def render_card(article: Article, number: Optional[int] = None) -> str:
    """Render an article as a card in the home screen list."""
    prefix = f"[{number}] " if number is not None else ""
    lines = [
        f"{prefix}{article.title}",
        f"    {article.category} • {article.read_time}",
        f"    {article.excerpt}",
        f"    {article.author} - {format_date(article.created_at)}",
        f"    Afbeelding: {image_or_placeholder(article)}",
    ]
    return "\n".join(lines)


def render_home(articles: Iterable[Article]) -> str:
    """Render the home screen with all loaded articles."""
    lines = [f"Welkom bij {APP_TITLE}", "", "Uitgelichte Artikelen", ""]
    for number, article in enumerate(articles, start=1):
        lines.append(render_card(article, number))
        lines.append("")
    return "\n".join(lines).rstrip()


def render_detail(article: Article) -> str:
    """Render the reading view for an article."""
    lines = [
        "← Terug",
        "",
        article.title,
        "",
        article.author,
        f"{format_date(article.created_at)} • {article.read_time}",
        f"Afbeelding: {image_or_placeholder(article)}",
        "",
        markup_to_text(article.content),
    ]
    return "\n".join(lines)


def render_detail_html(article: Article) -> str:
    """Render the reading view as an HTML fragment.

    Article content is inserted as-is; it is sanitized by the data store.
    """
    title = html.escape(article.title)
    return (
        "<article>\n"
        f"  <h1>{title}</h1>\n"
        f"  <p class=\"author\">{html.escape(article.author)}</p>\n"
        f"  <p class=\"meta\"><span>{format_date(article.created_at)}</span>"
        f" • <span>{html.escape(article.read_time)}</span></p>\n"
        f"  <img src=\"{html.escape(image_or_placeholder(article), quote=True)}\" alt=\"{title}\">\n"
        f"  <div class=\"prose\">{article.content}</div>\n"
        "</article>"
    )
