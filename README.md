# trashbin

A small library for working with a freedesktop-style trash directory
(`files/` holding the trashed items and `info/` holding one `.trashinfo`
record for each). It lists what is in the bin, sorts it, restores items to
the path they were deleted from, and empties the bin after a confirmation
step. It also provides a fuzzy substring matcher (the Bitap algorithm,
counting substitutions only).

No third-party libraries are needed.

## Install

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `trashbin.fuzzer` – `get_fuzzy_score(text, pattern, max_distance)` returns
  the start index of the first approximate match of `pattern` in `text`
  (at most `max_distance` substitutions), `0` for an empty pattern and `-1`
  when nothing matches or the pattern is longer than 31 characters. A
  negative `max_distance` raises `ValueError`.
- `trashbin.config` – the frozen dataclass `BudgieConfig` and
  `build_config(prefix, version, secondary_prefix=None)`, which derives the
  module, plugin, data, locale and configuration directories from an
  absolute install prefix (`ValueError` otherwise).
  `BudgieConfig.has_secondary_plugin_dirs` tells whether a second prefix was
  given.
- `trashbin.sortmode` – the `SortMode` enum (`TYPE`, `A_Z`, `Z_A`,
  `DATE_ASCENDING`, `DATE_DESCENDING`), each with a `nick` (`"type"`,
  `"a-z"`, `"z-a"`, `"date-ascending"`, `"date-descending"`), and
  `sort_mode_from_nick(nick)`, which raises `ValueError` for unknown nicks.
- `trashbin.info` – the frozen dataclass `TrashInfo` (name, display name,
  restore path, icon name, size, whether it is a directory, deletion time),
  `parse_trashinfo(text)` returning the decoded original path and deletion
  time, and `read_trash_info(files_dir, info_dir, name)`.
- `trashbin.item` – `TrashItem(path, info, info_path=None)` with
  `delete()` (removes the file or directory tree and its info record) and
  `restore()` (moves it back and returns the destination; raises
  `FileExistsError` if the destination exists and `FileNotFoundError` if its
  directory is missing). Also the comparison functions `collate_by_date`,
  `collate_by_name` (locale-aware), `collate_by_type` (directories first,
  then by name) and `sort_items(items, mode)`.
- `trashbin.manager` – `TrashManager(trash_dir=None)` works on the given
  directory, or on `$XDG_DATA_HOME/Trash` (`~/.local/share/Trash` when unset).
  `connect(signal, callback)` registers for `"trash-added"` (called with a
  `TrashItem`) or `"trash-removed"` (called with the removed item's path).
  `scan_items()` reports every item, `refresh()` reports what changed since
  the last look, and `item_count()` gives the number of known items. Entries
  without a readable info record are skipped.
- `trashbin.buttonbar` – `Button` and `ButtonBar`: a content area above a
  list of buttons, each tied to a response id. `add_button(text,
  response_id)`, `connect_response(callback)`, `click(response_id)` (returns
  `False` for an insensitive button), `add_response_style_class(response_id,
  style)` and `set_response_sensitive(response_id, sensitive)`; an unknown
  response id raises `KeyError`.
- `trashbin.settings` – `TrashSettings(sort_mode=SortMode.TYPE)` holds the
  sort mode; `select(mode)` accepts a `SortMode`, a nick or an integer value,
  calls the callbacks registered with `connect_changed(callback)` and returns
  whether the mode changed.
- `trashbin.popover` – `TrashPopover(settings, manager)` connects to the
  manager and scans it, keeps the rows sorted by the current sort mode
  (`rows()`), tracks a selection (`select(items)`, `selected`), restores the
  selection (`restore_selected()` returns the restored paths) and runs the
  two-step empty flow: `request_empty()` (returns `False` when the bin is
  empty) followed by `confirm_empty(confirmed)`, which returns how many items
  were deleted and raises `RuntimeError` if no request is pending. It emits
  `"trash-filled"` when an item is added and `"trash-empty"` when the last one
  goes away, to callbacks registered with `connect(signal, callback)`.

## Example

```python
from pathlib import Path

from trashbin.manager import TrashManager
from trashbin.popover import TrashPopover
from trashbin.settings import TrashSettings
from trashbin.sortmode import SortMode

manager = TrashManager(Path.home() / ".local/share/Trash")
settings = TrashSettings(SortMode.DATE_DESCENDING)
popover = TrashPopover(settings, manager)  # scans the bin
popover.connect("trash-empty", lambda: print("bin is empty"))

for item in popover.rows():
    print(item.info.display_name, item.info.deletion_time)

settings.select("a-z")  # rows() now lists by name

if popover.request_empty():
    deleted = popover.confirm_empty(True)
    print(f"deleted {deleted} items")
```

## What it does not do

- There is no graphical interface and no command-line program; the button
  bar, settings and popover are plain objects that hold state and call
  callbacks.
- The trash directory is not watched. Call `TrashManager.refresh()` to pick
  up changes made by other programs.
- It does not move files into the trash, only lists, restores and deletes
  what is already there.
- Errors while restoring or deleting from the popover are logged, not shown
  as desktop notifications.