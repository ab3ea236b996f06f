"""The applet's sort-mode setting and the controls bound to it."""

from __future__ import annotations

from typing import Any, Callable

from trashbin.sortmode import KEY_SORT_MODE, SortMode, sort_mode_from_nick


def _coerce(mode: SortMode | str | int) -> SortMode:
    if isinstance(mode, SortMode):
        return mode
    if isinstance(mode, str):
        return sort_mode_from_nick(mode)
    try:
        return SortMode(mode)
    except ValueError:
        raise ValueError(f"unknown sort mode: {mode!r}") from None


class TrashSettings:
    """Holds the chosen sort mode and tells listeners when it changes."""

    key = KEY_SORT_MODE

    def __init__(self, sort_mode: SortMode | str | int = SortMode.TYPE) -> None:
        self._sort_mode = _coerce(sort_mode)
        self._callbacks: list[Callable[[SortMode], Any]] = []

    @property
    def sort_mode(self) -> SortMode:
        """The currently selected sort mode."""
        return self._sort_mode

    def connect_changed(self, callback: Callable[[SortMode], Any]) -> None:
        """Call ``callback`` with the new mode whenever the sort mode changes."""
        self._callbacks.append(callback)

    def select(self, mode: SortMode | str | int) -> bool:
        """Choose a sort mode by member, nick or value.

        Choosing the mode already selected changes nothing. Returns whether
        the setting changed.
        """
        new_mode = _coerce(mode)
        if new_mode == self._sort_mode:
            return False
        self._sort_mode = new_mode
        for callback in list(self._callbacks):
            callback(new_mode)
        return True