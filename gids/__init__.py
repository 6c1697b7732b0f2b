"""Nederlandse Gids - browse articles and categories from a remote data store."""

__version__ = "0.1.0"
