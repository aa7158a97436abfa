"""Persistent settings kept in a table file in the user's home directory."""

from __future__ import annotations

import os
import sys
from types import TracebackType

from .table import Table, TableError
from .unicode import ConversionError

__all__ = ["default_path", "TableStorage"]


def default_path() -> str:
    """Return the location of the settings file for this platform."""
    if sys.platform == "win32":
        return "einstein.cfg"
    home = os.environ.get("HOME") or os.path.expanduser("~")
    return os.path.join(home, ".einstein", "einsteinrc")


def _ensure_file(path: str) -> None:
    """Create the settings file and its directory if they are missing."""
    if os.path.exists(path):
        return
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "ab"):
            pass
    except OSError:
        pass


class TableStorage:
    """Named integer and string settings backed by a table file."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = os.fspath(path) if path is not None else default_path()
        _ensure_file(self._path)
        try:
            self._table = Table.load(self._path)
        except (TableError, ConversionError) as err:
            print(err, file=sys.stderr)
            self._table = Table()

    @property
    def path(self) -> str:
        """The file the settings are read from and written to."""
        return self._path

    def get_int(self, name: str, default: int) -> int:
        """Return an integer setting, or the default if it is not set."""
        return self._table.get_int(name, default)

    def get_string(self, name: str, default: str) -> str:
        """Return a string setting, or the default if it is not set."""
        return self._table.get_string(name, default)

    def set_int(self, name: str, value: int) -> None:
        """Store an integer setting."""
        self._table.set_int(name, value)

    def set_string(self, name: str, value: str) -> None:
        """Store a string setting."""
        self._table.set_string(name, value)

    def flush(self) -> None:
        """Write all settings to the file."""
        self._table.save(self._path)

    def __enter__(self) -> TableStorage:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.flush()