"""The body of the trash applet's popover: a sorted list of trashed items with actions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable

from trashbin.buttonbar import ButtonBar
from trashbin.item import TrashItem, sort_items
from trashbin.manager import TRASH_ADDED, TRASH_REMOVED, TrashManager
from trashbin.settings import TrashSettings
from trashbin.sortmode import SortMode

logger = logging.getLogger(__name__)

RESPONSE_EMPTY = 1
RESPONSE_RESTORE = 2
RESPONSE_NO = -9
RESPONSE_YES = -8

TRASH_EMPTY = "trash-empty"
TRASH_FILLED = "trash-filled"
_SIGNALS = (TRASH_EMPTY, TRASH_FILLED)

DESTRUCTIVE_ACTION = "destructive-action"


class TrashPopover:
    """Lists the items of a :class:`TrashManager` and offers restore and empty actions.

    ``trash-filled`` is emitted whenever an item is added, ``trash-empty``
    when the last item goes away. Both callbacks take no arguments.
    """

    def __init__(self, settings: TrashSettings, manager: TrashManager) -> None:
        self._settings = settings
        self._manager = manager
        self._sort_mode: SortMode = settings.sort_mode
        self._rows: dict[Path, TrashItem] = {}
        self._selected: set[Path] = set()
        self._handlers: dict[str, list[Callable[[], Any]]] = {name: [] for name in _SIGNALS}
        self._restored: list[Path] = []
        self._deleted = 0

        settings.connect_changed(self._settings_changed)

        self.button_bar = ButtonBar()
        restore = self.button_bar.add_button("Restore", RESPONSE_RESTORE)
        restore.tooltip = "Restore selected items"
        empty = self.button_bar.add_button("Empty", RESPONSE_EMPTY)
        empty.tooltip = "Empty the trash bin"
        self.button_bar.connect_response(self._handle_response)

        self.confirm_bar = ButtonBar()
        self.confirm_bar.revealed = False
        self.confirm_bar.content_area.append("Are you sure you want to empty the trash bin?")
        self.confirm_bar.add_button("No", RESPONSE_NO)
        self.confirm_bar.add_button("Yes", RESPONSE_YES)
        self.confirm_bar.add_response_style_class(RESPONSE_YES, DESTRUCTIVE_ACTION)
        self.confirm_bar.connect_response(self._confirm_response)

        self._selection_changed()
        self._update_empty_sensitivity()

        manager.connect(TRASH_ADDED, self._trash_added)
        manager.connect(TRASH_REMOVED, self._trash_removed)
        manager.scan_items()

    @property
    def sort_mode(self) -> SortMode:
        """The order the rows are listed in."""
        return self._sort_mode

    @property
    def selected(self) -> list[TrashItem]:
        """The selected rows, in display order."""
        return [item for item in self.rows() if item.path in self._selected]

    def connect(self, signal: str, callback: Callable[[], Any]) -> None:
        """Register ``callback`` for ``trash-empty`` or ``trash-filled``."""
        if signal not in self._handlers:
            raise ValueError(f"unknown signal: {signal!r}")
        self._handlers[signal].append(callback)

    def _emit(self, signal: str) -> None:
        for callback in list(self._handlers[signal]):
            callback()

    def rows(self) -> list[TrashItem]:
        """The listed items, ordered by the current sort mode."""
        return sort_items(self._rows.values(), self._sort_mode)

    def select(self, items: Iterable[TrashItem]) -> None:
        """Replace the selection with ``items``, which must all be listed."""
        paths = set()
        for item in items:
            if item.path not in self._rows:
                raise ValueError(f"item is not listed: {item.path}")
            paths.add(item.path)
        self._selected = paths
        self._selection_changed()

    def restore_selected(self) -> list[Path]:
        """Restore the selected items; returns where they were moved back to."""
        self._restored = []
        self.button_bar.click(RESPONSE_RESTORE)
        return list(self._restored)

    def request_empty(self) -> bool:
        """Ask to empty the trash, showing the confirmation bar.

        Returns False when there is nothing to empty.
        """
        return self.button_bar.click(RESPONSE_EMPTY)

    def confirm_empty(self, confirmed: bool) -> int:
        """Answer the pending empty request; returns how many items were deleted."""
        if not self.confirm_bar.revealed:
            raise RuntimeError("no request to empty the trash is pending")
        self._deleted = 0
        self.confirm_bar.click(RESPONSE_YES if confirmed else RESPONSE_NO)
        return self._deleted

    def _settings_changed(self, mode: SortMode) -> None:
        self._sort_mode = mode

    def _update_empty_sensitivity(self) -> None:
        self.button_bar.set_response_sensitive(RESPONSE_EMPTY, self._manager.item_count() > 0)

    def _selection_changed(self) -> None:
        self.button_bar.set_response_sensitive(RESPONSE_RESTORE, bool(self._selected))

    def _trash_added(self, item: TrashItem) -> None:
        self._rows[item.path] = item
        self._update_empty_sensitivity()
        self._emit(TRASH_FILLED)

    def _trash_removed(self, path: Path) -> None:
        self._rows.pop(path, None)
        if path in self._selected:
            self._selected.discard(path)
            self._selection_changed()
        self._update_empty_sensitivity()
        if self._manager.item_count() == 0:
            self._emit(TRASH_EMPTY)

    def _handle_response(self, response: int) -> None:
        if response == RESPONSE_RESTORE:
            for item in self.selected:
                try:
                    self._restored.append(item.restore())
                except OSError as err:
                    logger.error("Unable to restore '%s': %s", item.info.name, err)
            self._manager.refresh()
        elif response == RESPONSE_EMPTY:
            self.button_bar.revealed = False
            self.confirm_bar.revealed = True

    def _confirm_response(self, response: int) -> None:
        if response == RESPONSE_YES:
            for item in list(self._rows.values()):
                try:
                    item.delete()
                    self._deleted += 1
                except OSError as err:
                    logger.error("Unable to delete '%s': %s", item.info.name, err)
            self._manager.refresh()
        self.confirm_bar.revealed = False
        self.button_bar.revealed = True