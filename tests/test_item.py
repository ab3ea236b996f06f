from datetime import datetime
from pathlib import Path

import pytest

from trashbin.info import TrashInfo
from trashbin.item import (
    TrashItem,
    collate_by_date,
    collate_by_name,
    collate_by_type,
    sort_items,
)
from trashbin.sortmode import SortMode


def _item(name, is_dir=False, when=datetime(2023, 1, 1), restore="/nowhere", path=None, info_path=None):
    info = TrashInfo(
        name=name,
        display_name=name,
        restore_path=restore,
        icon="folder" if is_dir else "text-x-generic",
        size=0,
        is_directory=is_dir,
        deletion_time=when,
    )
    return TrashItem(path=path or Path(name), info=info, info_path=info_path)


def test_collate_by_name_orders_alphabetically():
    a, b = _item("apple"), _item("banana")
    assert collate_by_name(a, b) < 0
    assert collate_by_name(b, a) > 0
    assert collate_by_name(a, _item("apple")) == 0


def test_collate_by_date():
    old = _item("x", when=datetime(2020, 5, 1))
    new = _item("y", when=datetime(2022, 5, 1))
    assert collate_by_date(old, new) < 0
    assert collate_by_date(new, old) > 0
    assert collate_by_date(old, _item("z", when=datetime(2020, 5, 1))) == 0


def test_collate_by_type_directories_first():
    directory = _item("zeta", is_dir=True)
    regular = _item("alpha")
    assert collate_by_type(directory, regular) == -1
    assert collate_by_type(regular, directory) == 1
    assert collate_by_type(_item("a", is_dir=True), _item("b", is_dir=True)) < 0
    assert collate_by_type(_item("b"), _item("a")) > 0


@pytest.mark.parametrize(
    "mode, expected",
    [
        (SortMode.A_Z, ["a", "b", "c"]),
        (SortMode.Z_A, ["c", "b", "a"]),
        (SortMode.DATE_ASCENDING, ["b", "c", "a"]),
        (SortMode.DATE_DESCENDING, ["a", "c", "b"]),
        (SortMode.TYPE, ["c", "a", "b"]),
    ],
)
def test_sort_items(mode, expected):
    items = [
        _item("b", when=datetime(2020, 1, 1)),
        _item("a", when=datetime(2022, 1, 1)),
        _item("c", is_dir=True, when=datetime(2021, 1, 1)),
    ]
    assert [item.info.name for item in sort_items(items, mode)] == expected


def _trash_file(tmp_path, name, restore, is_dir=False):
    files = tmp_path / "Trash" / "files"
    info = tmp_path / "Trash" / "info"
    files.mkdir(parents=True, exist_ok=True)
    info.mkdir(parents=True, exist_ok=True)
    path = files / name
    if is_dir:
        path.mkdir()
        (path / "inner.txt").write_text("inner")
    else:
        path.write_text("content")
    info_path = info / f"{name}.trashinfo"
    info_path.write_text("[Trash Info]\nPath=x\nDeletionDate=2023-01-01T00:00:00\n")
    return _item(name, is_dir=is_dir, restore=str(restore), path=path, info_path=info_path)


def test_delete_file(tmp_path):
    item = _trash_file(tmp_path, "a.txt", tmp_path / "a.txt")
    item.delete()
    assert not item.path.exists()
    assert not item.info_path.exists()


def test_delete_directory(tmp_path):
    item = _trash_file(tmp_path, "dir", tmp_path / "dir", is_dir=True)
    item.delete()
    assert not item.path.exists()
    assert not item.info_path.exists()


def test_delete_missing_raises(tmp_path):
    item = _item("ghost", path=tmp_path / "ghost")
    with pytest.raises(FileNotFoundError):
        item.delete()


def test_restore_moves_back(tmp_path):
    target = tmp_path / "home" / "a.txt"
    target.parent.mkdir()
    item = _trash_file(tmp_path, "a.txt", target)
    assert item.restore() == target
    assert target.read_text() == "content"
    assert not item.path.exists()
    assert not item.info_path.exists()


def test_restore_refuses_to_overwrite(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("existing")
    item = _trash_file(tmp_path, "a.txt", target)
    with pytest.raises(FileExistsError):
        item.restore()
    assert item.path.exists()
    assert target.read_text() == "existing"


def test_restore_missing_parent(tmp_path):
    item = _trash_file(tmp_path, "a.txt", tmp_path / "gone" / "a.txt")
    with pytest.raises(FileNotFoundError):
        item.restore()
    assert item.path.exists()