"""Data models for Nederlandse Gids."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Category:
    """Represents a navigation category with optional subcategory labels."""

    id: str
    name: str
    subcategories: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class Article:
    """Represents an article as loaded from the data store."""

    id: str
    title: str
    excerpt: str
    content: str
    author: str
    category: str
    read_time: str
    created_at: datetime
    image_url: Optional[str] = None
