"""A single trashed file and the orderings used to list trashed files."""

from __future__ import annotations

import errno
import locale
import shutil
from dataclasses import dataclass
from functools import cmp_to_key
from pathlib import Path
from typing import Callable, Iterable

from trashbin.info import TrashInfo
from trashbin.sortmode import SortMode


@dataclass(frozen=True)
class TrashItem:
    """A file in the trash bin together with its metadata."""

    path: Path
    info: TrashInfo
    info_path: Path | None = None

    def _remove_info(self) -> None:
        if self.info_path is not None:
            self.info_path.unlink(missing_ok=True)

    def delete(self) -> None:
        """Permanently delete the trashed file and its metadata."""
        if self.path.is_dir() and not self.path.is_symlink():
            shutil.rmtree(self.path)
        else:
            self.path.unlink()
        self._remove_info()

    def restore(self) -> Path:
        """Move the trashed file back to where it was deleted from."""
        destination = Path(self.info.restore_path)
        if destination.exists() or destination.is_symlink():
            raise FileExistsError(
                errno.EEXIST, "restore target already exists", str(destination)
            )
        if not destination.parent.is_dir():
            raise FileNotFoundError(
                errno.ENOENT, "restore target directory is missing", str(destination.parent)
            )
        shutil.move(str(self.path), str(destination))
        self._remove_info()
        return destination


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def collate_by_date(a: TrashItem, b: TrashItem) -> int:
    """Order two items by deletion time, oldest first."""
    return _cmp(a.info.deletion_time, b.info.deletion_time)


def collate_by_name(a: TrashItem, b: TrashItem) -> int:
    """Order two items alphabetically by file name, following the locale."""
    return locale.strcoll(a.info.name, b.info.name)


def collate_by_type(a: TrashItem, b: TrashItem) -> int:
    """Order directories before files, each group alphabetically."""
    a_dir = a.info.is_directory
    b_dir = b.info.is_directory
    if a_dir and not b_dir:
        return -1
    if b_dir and not a_dir:
        return 1
    return collate_by_name(a, b)


def _swap(cmp: Callable[[TrashItem, TrashItem], int]) -> Callable[[TrashItem, TrashItem], int]:
    return lambda a, b: cmp(b, a)


_COMPARATORS: dict[SortMode, Callable[[TrashItem, TrashItem], int]] = {
    SortMode.TYPE: collate_by_type,
    SortMode.A_Z: collate_by_name,
    SortMode.Z_A: _swap(collate_by_name),
    SortMode.DATE_ASCENDING: collate_by_date,
    SortMode.DATE_DESCENDING: _swap(collate_by_date),
}


def sort_items(items: Iterable[TrashItem], mode: SortMode) -> list[TrashItem]:
    """Return the items ordered according to ``mode``."""
    comparator = _COMPARATORS.get(mode, collate_by_type)
    return sorted(items, key=cmp_to_key(comparator))