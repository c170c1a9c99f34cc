# kanbanfs

Building blocks for kanban boards kept as ordinary files: slugs for
folder names, atomic writes, YAML frontmatter and H1-titled markdown,
the on-disk path scheme for boards, columns and tasks, a small
single-file JSON board store, configuration, and the logic a terminal
board viewer needs (key bindings, card text, focus and scrolling,
column layout).

## Modules

| Module | Purpose |
| --- | --- |
| `kanbanfs.slug` | `generate` turns a display name into a folder-safe slug. |
| `kanbanfs.fsutil` | `safe_write` for atomic writes, plus `ensure_dir`, `remove_dir`, `exists` and `is_dir`. |
| `kanbanfs.frontmatter` | `parse_frontmatter`, `serialize_frontmatter`, `parse_markdown_with_title`, `serialize_markdown_with_title`, `parse_yaml`, `serialize_yaml`. |
| `kanbanfs.pathbuilder` | `PathBuilder` gives the location of board, column and task files. |
| `kanbanfs.storage` | `Board`, `Column`, `Task`, `BoardStorage`, `board_to_json`, `board_from_json`, `default_board`. |
| `kanbanfs.config` | `Config` and its sections, `default_config`, `config_from_dict`, `config_to_dict`, `ConfigLoader`. |
| `kanbanfs.keymap` | `KeyBinding`, `KeyMap`, `build_keymap`, `format_keys_help`. |
| `kanbanfs.cards` | `priority_icon`, `priority_color`, `format_due_date`, `format_tags`, `truncate_description`, `truncate_title`. |
| `kanbanfs.navigation` | `Navigator` tracks column and task focus and scroll offsets. |
| `kanbanfs.layout` | `compute_layout`, `task_window`, `help_text`, `scroll_info`, with the `BoardLayout` and `TaskWindow` results. |

## On-disk layout

`PathBuilder` describes this layout:

```
<boards root>/
  <board id>/
    metadata.yml
    board.md
    columns/
      <column name>/
        metadata.yml
        column.md
        tasks/
          <task folder>/
            metadata.yml
            task.md
```

```python
from kanbanfs.pathbuilder import PathBuilder

paths = PathBuilder("/tmp/boards")
paths.column_dir("work", "in-progress")        # /tmp/boards/work/columns/in-progress
paths.task_metadata("work", "in-progress", "WRK-1-fix-login")
# /tmp/boards/work/columns/in-progress/tasks/WRK-1-fix-login/task.md
```

All methods return `pathlib.Path` objects.

## Slugs

```python
from kanbanfs.slug import generate

generate("In Progress")   # "in-progress"
generate("!!!")           # "untitled"
```

A slug is lower case and contains only `a-z`, `0-9` and single hyphens,
with no hyphen at either end. It is at most 50 characters long.

## Markdown and frontmatter

```python
from kanbanfs.frontmatter import parse_markdown_with_title, serialize_markdown_with_title

text = serialize_markdown_with_title("Fix login", "OAuth callback fails.")
# b"# Fix login\n\nOAuth callback fails.\n"
doc = parse_markdown_with_title(text)
doc.title     # "Fix login"
doc.content   # "OAuth callback fails."
```

`parse_frontmatter` reads a document whose first line is `---`, takes the
YAML up to the next `---` line as the frontmatter, and takes the trimmed
remainder as the content. A document that does not start with `---` is
all content. The result is a `FrontmatterDocument`. Its `get_string`,
`get_int` and `get_string_list` methods return `""`, `0` or `[]` when a
key is missing or holds the wrong type. Timestamp-like values stay as
strings. Malformed YAML raises `FrontmatterError`, and so does
frontmatter that is not a mapping. `serialize_yaml` and `parse_yaml`
convert between plain data and YAML bytes. They also raise
`FrontmatterError` on failure.

## Atomic writes

`safe_write(path, data, mode=0o644)` accepts `bytes` or `str`. It creates
missing parent directories, then writes the data to a temporary file in
the target directory. It syncs that file, sets its mode, and renames it
over the target. If anything fails, the temporary file is removed and
the error propagates. `remove_dir` removes a tree and does nothing if
the path does not exist. `exists` returns `False` only for a missing
path. `is_dir` raises when the path cannot be examined.

## Single-file board store

`BoardStorage(data_dir=None)` keeps one board in `board.json`. If no
directory is given, it uses `~/.local/share/mkanban` and creates the
directory. `load_board()` returns `default_board()`, a three-column
sample board, when the file does not exist yet. `save_board(board)`
writes indented JSON. Errors are raised as `StorageError`.

## Configuration

`ConfigLoader(config_path=None, home=None)` defaults to
`~/.config/mkanban/config.yml`. If the file is missing, `load()` writes
`default_config(home)` to it, creates the configured boards directory,
and returns that configuration. Otherwise it parses the YAML, and any
fields that are absent take zero values. `save(config)` writes the
configuration as YAML. Empty fields of text styles are left out. Errors
are raised as `ConfigError`.

The defaults put the boards under `~/.local/share/mkanban/boards` and
define these keys:

- `up`/`k` and `down`/`j` move between tasks.
- `left`/`h` and `right`/`l` move between columns.
- `m`/`enter` moves a task.
- `a` adds a task and `d` deletes one.
- `q`/`ctrl+c` quits.

The defaults also include a colour scheme and session-tracking settings.

## Terminal board logic

None of these functions draw anything. They compute values that a
renderer uses.

- `build_keymap(config.keybindings)` returns a `KeyMap`. It also accepts
  a mapping. `KeyMap.action_for(key)` returns the action name for a key,
  such as `"quit"` or `"move"`, or `None` if no action is bound to it.
  `format_keys_help(["up", "k"])` gives `"↑/k"`.
- `Navigator(column_sizes, width, height)` works with per-column task
  counts. `move_left`, `move_right`, `move_up` and `move_down` return
  whether the focus moved, and each keeps the focused task scrolled into
  view. `resize` keeps the focused column visible. `status_message` gives
  a one-line summary.
- `compute_layout(width, height, total_columns, horizontal_offset)`
  chooses a column content width between 25 and 60. It works out how
  many columns fit, whether to show the left and right scroll
  indicators, and the left margin that centres the board. It raises
  `ValueError` when the width is 0 or there are no columns.
- `task_window(scroll_offset, total_tasks, viewport_height)` returns the
  range of visible tasks and whether to show the up and down
  indicators. It counts about six rows per card.
- `help_text()` returns the footer line. `scroll_info(layout)` returns
  text like `"Columns: 1-3 of 5"`, or `""` when every column is visible.
- The `cards` helpers produce the text of a card:
  - `format_due_date(due, is_overdue, colors, now)` returns a line such
    as `📅 Mar 04 (due in 3 days)`, together with its urgency colour.
  - `format_tags` fits tags into a width and replaces the ones that do
    not fit with `+N`.
  - `truncate_description` and `truncate_title` shorten text and end it
    with `...`.

## What this package does not do

- It has no board repository. Nothing here loads or saves whole boards,
  columns and tasks in the directory layout above. The package only
  provides the paths and the file formats for it.
- It has no task or board model beyond the simple JSON board in
  `kanbanfs.storage`.
- It has no terminal screen and no command to run. The key bindings,
  navigation and layout are logic for a viewer, not a viewer.