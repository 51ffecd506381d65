"""SQLite store of previously opened files."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

from .api import db_log, default_data_dir

FILES_SQL = (
    "CREATE TABLE IF NOT EXISTS files("
    "id INTEGER PRIMARY KEY, file_path VARCHAR UNIQUE, file_name VARCHAR);"
)
INSERT_FILE_SQL = "INSERT INTO files(file_path, file_name) VALUES(?, ?);"
SELECT_FILES_SQL = "SELECT * FROM files;"
SELECT_FILE_BY_FILE_PATH_SQL = "SELECT * FROM files WHERE file_path = ?;"
DELETE_BY_FILE_PATH_SQL = "DELETE FROM files WHERE file_path = ?;"


@dataclass
class OpenedFile:
    """A file remembered between sessions."""

    file_path: str
    file_name: str
    id: int | None = None


class FileStore:
    """Records which files were open, backed by an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def init_db(self) -> None:
        """Create the files table if it is missing."""
        self._conn.execute(FILES_SQL)
        self._conn.commit()

    def insert_file(self, file_path: str, title: str) -> int | None:
        """Store a file; return its row id, or None if the path is already stored."""
        try:
            cursor = self._conn.execute(INSERT_FILE_SQL, (str(file_path), title))
        except sqlite3.IntegrityError:
            return None
        self._conn.commit()
        return cursor.lastrowid

    def delete_row(self, file_path: str) -> int:
        """Forget a file; return the number of rows removed."""
        cursor = self._conn.execute(DELETE_BY_FILE_PATH_SQL, (str(file_path),))
        self._conn.commit()
        return cursor.rowcount

    def find_previously_opened_files(self) -> list[OpenedFile]:
        """Return stored files that still exist, dropping rows for missing ones."""
        rows = self._conn.execute(SELECT_FILES_SQL).fetchall()
        found = []
        for row_id, file_path, title in rows:
            if Path(file_path).exists():
                found.append(OpenedFile(file_path=file_path, file_name=title, id=row_id))
            else:
                self.delete_row(file_path)
        return found

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> FileStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def default_db_path() -> Path:
    """Return the default location of the database file."""
    return default_data_dir() / "itools.db"


def connect(db_path: Path | str | None = None) -> FileStore:
    """Open (creating if needed) the database and return an initialised store."""
    path = Path(db_path) if db_path is not None else default_db_path()
    log_path = path.parent / "log.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    db_log("Initiating DB connection..", log_path)
    db_log(f"current dir: {Path.cwd()}", log_path)
    db_log(f"DB name path: {path}", log_path)
    try:
        connection = sqlite3.connect(path)
    except sqlite3.Error as exc:
        db_log("Failed to open DB connection.", log_path)
        db_log(f"  Database file checked: {path}", log_path)
        db_log(f"  Error: {exc}", log_path)
        raise
    db_log("DB connection is good!", log_path)
    store = FileStore(connection)
    try:
        store.init_db()
    except sqlite3.Error as exc:
        db_log(f"Error executing initializing db: {exc}", log_path)
        store.close()
        raise
    return store