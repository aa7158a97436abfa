"""The table of best (shortest) solving times."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = ["MAX_SCORES", "ScoreEntry", "TopScores"]

MAX_SCORES = 10


class _Storage(Protocol):
    def get_int(self, name: str, default: int) -> int: ...

    def get_string(self, name: str, default: str) -> str: ...

    def set_int(self, name: str, value: int) -> None: ...

    def set_string(self, name: str, value: str) -> None: ...

    def flush(self) -> None: ...


@dataclass
class ScoreEntry:
    """A player's name and solving time in seconds."""

    name: str
    score: int


class TopScores:
    """Up to MAX_SCORES entries ordered from best to worst time."""

    def __init__(self, storage: _Storage) -> None:
        self._storage = storage
        self._scores: list[ScoreEntry] = []
        for i in range(MAX_SCORES):
            score = storage.get_int(f"top_score_{i}", -1)
            if score < 0:
                break
            name = storage.get_string(f"top_name_{i}", "")
            self.add(name, score)
        self._modified = False

    def add(self, name: str, score: int) -> int:
        """Insert a result; return its position, or -1 if it did not qualify."""
        if not self._scores or score >= self.max_score():
            if self.is_full():
                return -1
            self._scores.append(ScoreEntry(name, score))
            self._modified = True
            return len(self._scores) - 1

        pos = 0
        for index, entry in enumerate(self._scores):
            if entry.score > score:
                self._scores.insert(index, ScoreEntry(name, score))
                self._modified = True
                break
            pos += 1

        while len(self._scores) > MAX_SCORES:
            self._modified = True
            self._scores.pop()

        return pos if self._modified else -1

    def save(self) -> None:
        """Write the entries to storage if they changed since the last save."""
        if not self._modified:
            return
        for no, entry in enumerate(self._scores):
            self._storage.set_string(f"top_name_{no}", entry.name)
            self._storage.set_int(f"top_score_{no}", entry.score)
        self._storage.flush()
        self._modified = False

    def scores(self) -> list[ScoreEntry]:
        """Return the entries, best first."""
        return list(self._scores)

    def max_score(self) -> int:
        """Return the worst time in the table, or -1 if it is empty."""
        if not self._scores:
            return -1
        return self._scores[-1].score

    def is_full(self) -> bool:
        """True when the table holds MAX_SCORES entries."""
        return len(self._scores) >= MAX_SCORES