"""Collection loading for Nederlandse Gids."""

import asyncio
import logging
from typing import Callable, Generic, Iterable, TypeVar

from .observable import Observable
from .store import StoreError

log = logging.getLogger("gids.loader")

T = TypeVar("T")


class CollectionLoader(Observable, Generic[T]):
    """Fetches one named collection from the data store and keeps the result.

    The snapshot only ever holds the result of the last successful fetch.
    Failed fetches are logged and leave the snapshot as it was.
    """

    def __init__(self, name: str, fetch: Callable[[], Iterable[T]]):
        """Initialize the loader.

        Args:
            name: Collection name used in log messages
            fetch: Blocking store operation returning the collection
        """
        super().__init__()
        self.name = name
        self._fetch = fetch
        self._items: tuple[T, ...] = ()
        self._loaded = False
        self._attempted = False
        self._in_flight = False
        self._active = True

    @property
    def loaded(self) -> bool:
        """True once a fetch has completed successfully."""
        return self._loaded

    def snapshot(self) -> tuple[T, ...]:
        """Return the collection from the last successful fetch."""
        return self._items

    async def activate(self) -> None:
        """Load the collection the first time its consumer becomes active."""
        self._active = True
        if self._attempted:
            return
        await self.load()

    def deactivate(self) -> None:
        """Mark the consumer gone; results arriving later are discarded."""
        self._active = False

    async def load(self) -> None:
        """Fetch the collection and replace the snapshot on success."""
        if self._in_flight:
            log.debug("Load of %s already in flight, skipping", self.name)
            return

        self._attempted = True
        self._in_flight = True
        try:
            items = await asyncio.to_thread(lambda: tuple(self._fetch()))
        except StoreError as e:
            log.error("Error fetching %s: %s", self.name, e)
            return
        finally:
            self._in_flight = False

        if not self._active:
            log.debug("Discarding %d %s fetched after deactivation", len(items), self.name)
            # Snapshot is still unset; the next activation loads again.
            self._attempted = False
            return

        self._items = items
        self._loaded = True
        log.info("Loaded %d %s", len(items), self.name)
        self._notify()
