"""Theme and menu state for Nederlandse Gids."""

from enum import Enum

from .observable import Observable


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"


class ShellState(Observable):
    """Display toggles that are independent of the content being shown."""

    def __init__(self):
        super().__init__()
        self.theme = Theme.LIGHT
        self.menu_open = False

    @property
    def is_dark(self) -> bool:
        return self.theme is Theme.DARK

    def toggle_theme(self) -> None:
        """Switch between light and dark display."""
        self.theme = Theme.LIGHT if self.is_dark else Theme.DARK
        self._notify()

    def toggle_menu(self) -> None:
        """Open or close the category menu."""
        self.menu_open = not self.menu_open
        self._notify()
