"""Player settings and the key=value file they are kept in."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from .cards import Suit
from .colors import color_code, color_index

CONFIG_FILE = "blackjack.cfg"

_LINE = re.compile(r"([^=]{1,63})=\s*([+-]?\d+)")
_BOOL_KEYS = ("values", "cash", "autoplay")
_COLOR_KEYS = {
    Suit.SPADES: "spades_color",
    Suit.HEARTS: "hearts_color",
    Suit.DIAMONDS: "diamonds_color",
    Suit.CLUBS: "clubs_color",
}


@dataclass
class Settings:
    """Display, betting and auto-continue switches plus a colour per suit."""

    values: bool = False
    cash: bool = False
    autoplay: bool = False
    spades_color: int = 0
    hearts_color: int = 0
    diamonds_color: int = 0
    clubs_color: int = 0

    @classmethod
    def load(cls, path: str | os.PathLike = CONFIG_FILE) -> "Settings":
        """Read settings from ``path``; a file that cannot be read gives defaults."""
        settings = cls()
        try:
            with open(path, encoding="utf-8") as handle:
                lines = handle.readlines()
        except OSError:
            return settings
        color_keys = set(_COLOR_KEYS.values())
        for line in lines:
            match = _LINE.match(line)
            if not match:
                continue
            key, value = match.group(1), int(match.group(2))
            if key in _BOOL_KEYS:
                setattr(settings, key, value != 0)
            elif key in color_keys:
                setattr(settings, key, value)
        return settings

    def save(self, path: str | os.PathLike = CONFIG_FILE) -> None:
        """Write the settings to ``path``, one key=value per line."""
        lines = [f"{key}={int(getattr(self, key))}" for key in _BOOL_KEYS]
        lines += [f"{key}={getattr(self, key)}" for key in _COLOR_KEYS.values()]
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("\n".join(lines) + "\n")

    def suit_color(self, suit: Suit | int) -> str:
        """Return the escape sequence the cards of ``suit`` are drawn in."""
        try:
            key = _COLOR_KEYS[Suit(suit)]
        except ValueError:
            return ""
        return color_code(getattr(self, key))

    def set_color(self, suit: Suit | int, name: str) -> None:
        """Give ``suit`` the colour called ``name``; unknown names raise ValueError."""
        index = color_index(name)
        setattr(self, _COLOR_KEYS[Suit(suit)], index)