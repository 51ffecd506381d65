"""Light and dark application themes."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)

DARK_THEME_LUMINANCE_THRESHOLD = 0.3

STYLE_PATHS = {
    "dark": ":/styles/dark_theme.qss",
    "light": ":/styles/light_theme.qss",
}


class AppTheme(Enum):
    """Available application themes."""

    LIGHT = 0
    DARK = 1


def theme_from_color(red: int, green: int, blue: int) -> AppTheme:
    """Pick the theme matching a window background colour by its luminance."""
    luminance = (0.2126 * red + 0.7152 * green + 0.0722 * blue) / 255.0
    if luminance < DARK_THEME_LUMINANCE_THRESHOLD:
        return AppTheme.DARK
    return AppTheme.LIGHT


class ThemeManager:
    """Keeps the applied style sheet in step with the chosen theme."""

    def __init__(
        self,
        style_loader: Callable[[AppTheme], str | None],
        apply_style: Callable[[str], None] | None = None,
    ) -> None:
        self._load = style_loader
        self._apply = apply_style or (lambda style: None)
        self._subscribers: list[Callable[[AppTheme], None]] = []
        self._current = AppTheme.DARK
        self.style_sheet = ""
        self.set_app_theme(self._current)

    def subscribe(self, callback: Callable[[AppTheme], None]) -> None:
        """Call the callback whenever a theme is applied."""
        self._subscribers.append(callback)

    def set_app_theme(self, theme: AppTheme) -> bool:
        """Load and apply the theme's style sheet; return True if it was applied."""
        if self._current == theme and self.style_sheet:
            return False
        try:
            style = self._load(theme)
        except OSError as exc:
            logger.warning("Failed to load stylesheet for %s: %s", theme.name, exc)
            return False
        if style is None:
            logger.warning("Failed to load stylesheet for %s", theme.name)
            return False
        self.style_sheet = style
        self._apply(style)
        self._current = theme
        logger.debug("Application theme set to: %s", theme.name.capitalize())
        for callback in list(self._subscribers):
            callback(theme)
        return True

    def on_palette_change(self, red: int, green: int, blue: int) -> AppTheme:
        """React to a new system window colour; return the theme it indicates."""
        detected = theme_from_color(red, green, blue)
        if detected != self._current:
            logger.debug("System palette changed. Detected new theme: %s", detected.name)
            self.set_app_theme(detected)
        return detected

    def current_theme(self) -> AppTheme:
        """Return the theme currently in effect."""
        return self._current