# buraq

This package provides building blocks for a desktop tool application. None of them needs a GUI toolkit.

## Modules

- `buraq.api`: shared types and helpers.
  - Types: `ErrorCode`, `ToolsApi`, `EditorState` and `ProcessedData`.
  - `EditorState` values compare equal when their block count, block number and cursor block number match.
  - `Plugin` is an abstract base class. It declares `name()`, `initialize()`, `shutdown()` and `perform_action()`.
  - `app_version()` returns `"0.0.16"`.
  - `default_data_dir()` returns the data directory, `<temp>/ITools/.data`.
  - `db_log(message, log_path=None)` appends a timestamped line to a log file. The default file is `log.txt` in the data directory. If the write fails, it reports the failure on stderr and does not raise.
- `buraq.storage`: a SQLite record of previously opened files.
  - `connect(db_path=None)` creates the directory, opens the database and creates the `files` table. It returns a `FileStore`. The default location is `default_db_path()`.
  - `FileStore` is a context manager with these methods:
    - `insert_file()` returns the new row id, or `None` if the path is already stored.
    - `delete_row()` returns the number of rows removed.
    - `find_previously_opened_files()` returns `OpenedFile` entries for paths that still exist. It deletes the rows of paths that no longer exist.
- `buraq.minion`: `Minion(on_result, on_progress, on_finished)` runs a task with `do_work(task)`.
  - It reports progress 0, then the result, then completion, and returns the result.
  - If the task raises, the result is the string `"Error: <message>"`.
- `buraq.utils`: `get_user_home_directory()` reads `HOME`, or `USERPROFILE` on Windows. It returns `None` if the variable is unset.
- `buraq.config`: reads the XML application configuration.
  - `parse_config(text)` and `load_config(path)` return a `Config` object.
  - A `Config` holds the title, version, logo name, `WindowConfig`, `AppIcons` and `MainStyles`. `MainStyles` is made of `StyleSheet` blocks.
  - A malformed or incomplete document raises `ConfigError`. Its `code` attribute holds an `ErrorCode`.
- `buraq.theme`: light and dark themes.
  - `theme_from_color(red, green, blue)` picks `AppTheme.DARK` when the luminance is below 0.3, and `AppTheme.LIGHT` otherwise.
  - `ThemeManager(style_loader, apply_style=None)` applies the style sheet that `style_loader` returns for a theme. It starts with the dark theme.
  - `ThemeManager` methods:
    - `set_app_theme()` applies a theme.
    - `on_palette_change()` switches theme when the window colour indicates a different one.
    - `subscribe()` registers a callback that runs whenever a theme is applied.
    - `current_theme()` returns the theme in effect.
- `buraq.network`: `get_network()` returns a shared `Network`.
  - `http_get(url)` returns the response body. A non-200 status is reported on stderr and does not raise.
  - `download_file(url, filename)` writes the response to a file and returns the number of bytes written.
  - Transport failures, HTTP errors from downloads, and unwritable files raise `NetworkError`.
- `buraq.updater`: `UpdateWorker(report)` runs the update steps and reports each one to a `ProgressReport`. Its `do_update(package_path, install_path, parent_pid)` method:
  - waits for the parent process to exit;
  - checks that the package is a readable `.zip` archive;
  - starts `<installPath>/bin/ITools.exe`.

## Installing

```
pip install .
```

## Example

```python
from buraq.storage import connect

with connect("/tmp/buraq-example/files.db") as store:
    store.insert_file("/tmp/script.ps1", "script.ps1")
    for opened in store.find_previously_opened_files():
        print(opened.file_path, opened.file_name)
```

## Updater command

```
buraq-updater <packagePath> <installPath> <parentPID>
```

The command needs all three arguments. If any is missing, it prints a usage line and exits with status 1. Each step of the update is printed to standard output. The command's start is also logged with `db_log`.

## What this package does not do

- There is no editor, window or other user interface. The configuration and theme classes hold only names and style text.
- `Plugin` is only a base class. Nothing here discovers or loads plugins.
- The updater does not extract the package or replace any installed files. It only checks that the archive opens, and then relaunches the application.