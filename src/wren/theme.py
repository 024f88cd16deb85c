"""Theme preference persistence.

One string key in a key-value store. Values are stored JSON-encoded, and
an unreadable stored value counts as no preference.
"""

import json
import logging
from collections.abc import MutableMapping
from typing import Literal

logger = logging.getLogger("wren.theme")

type Theme = Literal["light", "dark"]

STORAGE_KEY = "blog-theme"
THEMES: tuple[Theme, ...] = ("light", "dark")


class ThemeStore:
    """Read, write and toggle the persisted theme.

    Usage::

        themes = ThemeStore(storage, system_theme="dark")
        themes.current()   # stored preference, else the system theme
        themes.toggle()
    """

    __slots__ = ("storage", "system_theme")

    def __init__(
        self,
        storage: MutableMapping[str, str] | None = None,
        *,
        system_theme: Theme = "light",
    ) -> None:
        self.storage: MutableMapping[str, str] = storage if storage is not None else {}
        self.system_theme: Theme = system_theme

    def saved(self) -> Theme | None:
        """Return the stored preference, or None if absent or unreadable."""
        raw = self.storage.get(STORAGE_KEY)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable theme preference %r", raw)
            return None
        return value if value in THEMES else None

    def current(self) -> Theme:
        return self.saved() or self.system_theme

    def apply(self, theme: Theme) -> Theme:
        if theme not in THEMES:
            msg = f"Unknown theme {theme!r}. Expected one of: {', '.join(THEMES)}"
            raise ValueError(msg)
        self.storage[STORAGE_KEY] = json.dumps(theme)
        return theme

    def toggle(self) -> Theme:
        return self.apply("light" if self.current() == "dark" else "dark")
