"""Locating commands in the directories named by PATH."""

from __future__ import annotations

import os
import stat


def is_command(path):
    """Whether ``path`` names an existing file of regular type."""
    if not path:
        return False
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return bool(st.st_mode & stat.S_IFREG)


def find_path(path_var, command):
    """Return the first path at which ``command`` is found, or None.

    ``./name`` is accepted as is when it exists. An empty PATH entry
    stands for the current directory.
    """
    if path_var is None:
        return None
    if len(command) > 2 and command.startswith("./") and is_command(command):
        return command
    for directory in path_var.split(":"):
        candidate = f"{directory}/{command}" if directory else command
        if is_command(candidate):
            return candidate
    return None