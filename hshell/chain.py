"""Splitting command lines on ';', '&&' and '||', and '$' expansion."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .text import format_number, starts_with


class ChainOp(enum.Enum):
    """The operator that joins a command to the one before it."""

    NORM = 0
    OR = 1
    AND = 2
    CHAIN = 3


@dataclass(frozen=True)
class Command:
    """One command of a line and the operator that preceded it."""

    text: str
    op: ChainOp = ChainOp.NORM


_OPERATORS = (("||", ChainOp.OR), ("&&", ChainOp.AND), (";", ChainOp.CHAIN))


def split_chain(line):
    """Split ``line`` into commands at ';', '&&' and '||'.

    A line ending in an operator yields no trailing empty command; an
    empty line yields one empty command.
    """
    commands = []
    op = ChainOp.NORM
    start = 0
    index = 0
    while index < len(line):
        for token, token_op in _OPERATORS:
            if line.startswith(token, index):
                commands.append(Command(line[start:index], op))
                op = token_op
                index += len(token)
                start = index
                break
        else:
            index += 1
    if start < len(line) or not commands:
        commands.append(Command(line[start:], op))
    return commands


def should_run(op, status):
    """Whether a command joined by ``op`` runs after a command that gave ``status``."""
    if op is ChainOp.AND:
        return status == 0
    if op is ChainOp.OR:
        return status != 0
    return True


def expand_variables(argv, env, status, pid):
    """Return ``argv`` with words of the form ``$?``, ``$$`` and ``$NAME`` replaced.

    An unknown name expands to the empty string; a lone '$' is kept.
    """
    entries = env.entries()
    expanded = []
    for word in argv:
        if not word.startswith("$") or len(word) == 1:
            expanded.append(word)
        elif word == "$?":
            expanded.append(format_number(status))
        elif word == "$$":
            expanded.append(format_number(pid))
        else:
            prefix = word[1:] + "="
            value = next(
                (rest for rest in (starts_with(entry, prefix) for entry in entries) if rest is not None),
                "",
            )
            expanded.append(value)
    return expanded