"""An ordered environment of ``NAME=value`` entries."""

from __future__ import annotations

from .text import starts_with


class Environment:
    """The shell's own copy of the environment, kept in insertion order."""

    def __init__(self, entries=()):
        self._entries = list(entries)

    @classmethod
    def from_mapping(cls, mapping):
        """Build an environment from a mapping such as ``os.environ``."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def get(self, name):
        """Return the first non-empty value of ``name``, or None."""
        prefix = name + "="
        for entry in self._entries:
            rest = starts_with(entry, prefix)
            if rest:
                return rest
        return None

    def set(self, name, value):
        """Replace the first entry for ``name``, or append a new one."""
        prefix = name + "="
        entry = prefix + value
        for index, existing in enumerate(self._entries):
            if existing.startswith(prefix):
                self._entries[index] = entry
                return
        self._entries.append(entry)

    def unset(self, name):
        """Remove every entry for ``name``; return whether any was removed."""
        prefix = name + "="
        kept = [entry for entry in self._entries if not entry.startswith(prefix)]
        removed = len(kept) != len(self._entries)
        self._entries = kept
        return removed

    def entries(self):
        """Return the entries as a list of ``NAME=value`` strings."""
        return list(self._entries)

    def to_mapping(self):
        """Return the entries as a dict, suitable for starting a process."""
        mapping = {}
        for entry in self._entries:
            name, sep, value = entry.partition("=")
            if sep:
                mapping[name] = value
        return mapping