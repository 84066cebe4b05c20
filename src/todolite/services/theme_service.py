"""Theme service - applies and remembers the UI theme.

Independent of the todo list; it only shares the key-value store.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from todolite.repositories import KeyValueStore
from todolite.utils.logger import get_logger

THEME_KEY = "theme"


@runtime_checkable
class ThemeTarget(Protocol):
    """Anything that can display a named theme (the TUI app, a test double)."""

    def apply_theme(self, theme_name: str) -> None:
        ...


class ThemeService:
    """Loads the saved theme on start and persists every selection.

    Theme names are not validated here; the target decides what to do with
    a name it does not know.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        target: ThemeTarget,
        default_theme: str | None = None,
    ):
        self.storage = storage
        self.target = target
        self.default_theme = default_theme

    def init(self) -> str | None:
        """Apply the saved theme (or the configured default) if there is one."""
        theme = self.get_saved_theme() or self.default_theme
        if theme:
            self.set_theme(theme)
        return theme

    def set_theme(self, theme_name: str) -> None:
        self.target.apply_theme(theme_name)

    def select_theme(self, theme_name: str) -> None:
        """Apply *theme_name* and persist it for the next start."""
        self.set_theme(theme_name)
        self.save_theme(theme_name)
        get_logger().info("theme selected: %s", theme_name)

    def save_theme(self, theme_name: str) -> None:
        self.storage.set_item(THEME_KEY, theme_name)

    def get_saved_theme(self) -> str | None:
        return self.storage.get_item(THEME_KEY)
