"""Change notification for Nederlandse Gids state holders."""

from typing import Callable


class Observable:
    """Base class for state holders that announce changes to subscribers."""

    def __init__(self):
        self._subscribers: list[Callable] = []

    def subscribe(self, callback: Callable) -> Callable[[], None]:
        """Register a callback invoked with this holder after each change.

        Args:
            callback: Callable taking the changed holder

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self)
