"""Alias definitions and their expansion in command position."""

from __future__ import annotations

MAX_ALIAS_DEPTH = 10


class AliasTable:
    """Named aliases, kept in the order they were (re)defined."""

    def __init__(self):
        self._aliases = {}

    def __len__(self):
        return len(self._aliases)

    def __contains__(self, name):
        return name in self._aliases

    def define(self, assignment):
        """Apply ``name=value``; an empty value removes the alias.

        A redefined alias moves to the end of the listing. Raises
        ValueError when ``assignment`` holds no '='.
        """
        name, sep, value = assignment.partition("=")
        if not sep:
            raise ValueError(f"not an alias assignment: {assignment!r}")
        self.remove(name)
        if value:
            self._aliases[name] = value

    def remove(self, name):
        """Remove the alias ``name``; return whether it existed."""
        return self._aliases.pop(name, None) is not None

    def lookup(self, name):
        """Return the value of alias ``name``, or None."""
        return self._aliases.get(name)

    def format(self, name):
        """Return ``name='value'`` with a newline, or None for an unknown alias."""
        value = self._aliases.get(name)
        if value is None:
            return None
        return f"{name}='{value}'\n"

    def format_all(self):
        """Return every alias in listing form."""
        return "".join(f"{name}='{value}'\n" for name, value in self._aliases.items())

    def expand(self, word):
        """Replace ``word`` by its alias value, following at most ten levels."""
        for _ in range(MAX_ALIAS_DEPTH):
            value = self._aliases.get(word)
            if value is None:
                break
            word = value
        return word