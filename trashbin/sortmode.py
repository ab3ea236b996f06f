"""Sort orders for the trash bin listing."""

from __future__ import annotations

from enum import IntEnum

SETTINGS_SCHEMA_ID = "com.github.ebonjaeger.budgie-trash-applet"
KEY_SORT_MODE = "sort-mode"


class SortMode(IntEnum):
    """How trashed items are ordered."""

    TYPE = 1
    A_Z = 2
    Z_A = 3
    DATE_ASCENDING = 4
    DATE_DESCENDING = 5

    @property
    def nick(self) -> str:
        """The short name stored in settings."""
        return _NICKS[self]


_NICKS = {
    SortMode.TYPE: "type",
    SortMode.A_Z: "a-z",
    SortMode.Z_A: "z-a",
    SortMode.DATE_ASCENDING: "date-ascending",
    SortMode.DATE_DESCENDING: "date-descending",
}
_BY_NICK = {nick: mode for mode, nick in _NICKS.items()}


def sort_mode_from_nick(nick: str) -> SortMode:
    """Look up a sort mode by its settings nick."""
    try:
        return _BY_NICK[nick]
    except KeyError:
        raise ValueError(f"unknown sort mode: {nick!r}") from None