"""Command history kept in memory and in a file under the home directory."""

from __future__ import annotations

import os
from pathlib import Path

HIST_FILE = ".simple_shell_history"
HIST_MAX = 4096


def history_file(home):
    """Return the history file path for ``home``, or None when it is unset or empty."""
    if not home:
        return None
    return Path(home + "/" + HIST_FILE)


class History:
    """Numbered list of entered command lines."""

    def __init__(self, path=None, limit=HIST_MAX):
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.path = Path(path) if path is not None else None
        self.limit = limit
        self._lines = []

    def __len__(self):
        return len(self._lines)

    def add(self, line):
        """Append ``line``; its number is its position in the history."""
        self._lines.append(line)

    def lines(self):
        """Return the history lines, oldest first."""
        return list(self._lines)

    def load(self):
        """Read the history file; return the number of lines now held.

        A missing file, or one shorter than two bytes, loads nothing and
        gives 0. Once ``limit`` lines or more are held, the oldest are
        dropped until one fewer than ``limit`` remain.
        """
        if self.path is None:
            return 0
        try:
            data = self.path.read_bytes()
        except OSError:
            return 0
        if len(data) < 2:
            return 0
        text = data.decode("utf-8", "surrogateescape")
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        self._lines.extend(lines)
        if len(self._lines) >= self.limit:
            self._lines = self._lines[len(self._lines) - self.limit + 1:]
        return len(self._lines)

    def save(self):
        """Write all lines to the history file, replacing it.

        Returns False when there is no file to write to.
        """
        if self.path is None:
            return False
        payload = "".join(line + "\n" for line in self._lines)
        fd = os.open(self.path, os.O_CREAT | os.O_TRUNC | os.O_WRONLY, 0o644)
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(payload)
        return True

    def format(self):
        """Return the history as ``N: line`` rows, numbered from 0."""
        return "".join(f"{number}: {line}\n" for number, line in enumerate(self._lines))