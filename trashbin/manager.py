"""Watches a trash directory and reports items as they come and go."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path
from typing import Any, Callable

from trashbin.info import INFO_SUFFIX, read_trash_info
from trashbin.item import TrashItem

TRASH_ADDED = "trash-added"
TRASH_REMOVED = "trash-removed"
_SIGNALS = (TRASH_ADDED, TRASH_REMOVED)


def _default_trash_dir() -> Path:
    data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / "Trash"


class TrashManager:
    """Keeps track of the items in a trash directory.

    ``trash-added`` callbacks receive a :class:`TrashItem`; ``trash-removed``
    callbacks receive the path of the item that went away.
    """

    def __init__(self, trash_dir: str | PathLike[str] | None = None) -> None:
        self.trash_dir = Path(trash_dir) if trash_dir is not None else _default_trash_dir()
        self.files_dir = self.trash_dir / "files"
        self.info_dir = self.trash_dir / "info"
        self._handlers: dict[str, list[Callable[..., Any]]] = {name: [] for name in _SIGNALS}
        self._items: dict[str, TrashItem] = {}

    def connect(self, signal: str, callback: Callable[..., Any]) -> None:
        """Register ``callback`` for ``trash-added`` or ``trash-removed``."""
        if signal not in self._handlers:
            raise ValueError(f"unknown signal: {signal!r}")
        self._handlers[signal].append(callback)

    def _emit(self, signal: str, *args: Any) -> None:
        for callback in list(self._handlers[signal]):
            callback(*args)

    def _load(self, name: str) -> TrashItem | None:
        try:
            info = read_trash_info(self.files_dir, self.info_dir, name)
        except (OSError, ValueError):
            return None
        return TrashItem(
            path=self.files_dir / name,
            info=info,
            info_path=self.info_dir / f"{name}{INFO_SUFFIX}",
        )

    def _current(self) -> dict[str, TrashItem]:
        try:
            names = sorted(entry.name for entry in os.scandir(self.files_dir))
        except FileNotFoundError:
            return {}
        items = {}
        for name in names:
            item = self._load(name)
            if item is not None:
                items[name] = item
        return items

    def scan_items(self) -> None:
        """Report every item currently in the trash through ``trash-added``."""
        self._items = {}
        for name, item in self._current().items():
            self._items[name] = item
            self._emit(TRASH_ADDED, item)

    def refresh(self) -> None:
        """Report what was added to or removed from the trash since the last look."""
        current = self._current()
        for name in [name for name in self._items if name not in current]:
            del self._items[name]
            self._emit(TRASH_REMOVED, self.files_dir / name)
        for name, item in current.items():
            if name not in self._items:
                self._items[name] = item
                self._emit(TRASH_ADDED, item)

    def item_count(self) -> int:
        """The number of items known to be in the trash."""
        return len(self._items)