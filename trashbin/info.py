"""Metadata about one item in the trash bin."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from pathlib import Path
from urllib.parse import unquote

_HEADER = "[Trash Info]"
INFO_SUFFIX = ".trashinfo"


@dataclass(frozen=True)
class TrashInfo:
    """What is known about a trashed file."""

    name: str
    display_name: str
    restore_path: str
    icon: str
    size: int
    is_directory: bool
    deletion_time: datetime


def parse_trashinfo(text: str) -> tuple[str, datetime]:
    """Parse a ``.trashinfo`` document into its original path and deletion time."""
    in_section = False
    values: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            in_section = line == _HEADER
            continue
        if in_section and "=" in line:
            key, value = line.split("=", 1)
            values.setdefault(key.strip(), value.strip())

    if "Path" not in values:
        raise ValueError("trash info has no Path entry")
    if "DeletionDate" not in values:
        raise ValueError("trash info has no DeletionDate entry")

    try:
        deletion_time = datetime.fromisoformat(values["DeletionDate"])
    except ValueError as err:
        raise ValueError(f"invalid DeletionDate: {values['DeletionDate']!r}") from err
    return unquote(values["Path"]), deletion_time


def _icon_for(path: Path, is_directory: bool) -> str:
    if is_directory:
        return "folder"
    mime, _ = mimetypes.guess_type(path.name)
    return mime.replace("/", "-") if mime else "text-x-generic"


def read_trash_info(
    files_dir: str | PathLike[str],
    info_dir: str | PathLike[str],
    name: str,
) -> TrashInfo:
    """Read the trashed item ``name`` from a trash directory's files and info folders."""
    file_path = Path(files_dir) / name
    info_path = Path(info_dir) / f"{name}{INFO_SUFFIX}"

    restore_path, deletion_time = parse_trashinfo(info_path.read_text(encoding="utf-8"))
    stat = file_path.lstat()
    is_directory = file_path.is_dir()

    return TrashInfo(
        name=name,
        display_name=name,
        restore_path=restore_path,
        icon=_icon_for(file_path, is_directory),
        size=stat.st_size,
        is_directory=is_directory,
        deletion_time=deletion_time,
    )