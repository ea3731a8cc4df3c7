"""Chart theme utilities."""

from .light_theme import LIGHT_THEME

DEFAULT_THEME = LIGHT_THEME

__all__ = ["LIGHT_THEME", "DEFAULT_THEME"]
