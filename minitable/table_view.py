"""Coloured dump of a command table for debugging."""

from __future__ import annotations

from typing import Iterable, Sequence

from .parser import Command

_GREEN_BAR = "\033[32m|\033[0m"
_NEWLINE_BAR = "\033[32m\n|\033[0m"
_RULE = "\033[32m|------------------------------------|\n"
_END_OF_LINE = "\033\n[32m|-------------end-of-line------------|\033[0m\n\n"


def _contents(items: Iterable[str]) -> str:
    return "".join(f"\033[35m[{item}]\033[0m" for item in items)


def format_command(command: Command) -> str:
    """Render the counts and contents of one command."""
    return "".join(
        [
            _GREEN_BAR,
            f"\033[33m Nbr of args:         [{len(command.args)}]\n",
            _GREEN_BAR,
            f"\033[33m Nbr of red symbols:  [{len(command.red_symbols)}]\n\033[0m",
            _GREEN_BAR,
            f"\033[33m Nbr of filenames:    [{len(command.filenames)}]\n",
            _GREEN_BAR,
            _NEWLINE_BAR,
            "\033[35m ARGS:         ",
            _contents(command.args),
            _NEWLINE_BAR,
            "\033[35m REDIRECTIONS: \033[0m",
            _contents(command.red_symbols),
            _NEWLINE_BAR,
            "\033[35m FILENAMES:    ",
            _contents(command.filenames),
            _NEWLINE_BAR,
        ]
    )


def format_table(commands: Sequence[Command], syntax_error: bool) -> str:
    """Render every line of the table; nothing when a syntax error occurred."""
    if syntax_error:
        return ""
    parts = []
    for line, command in enumerate(commands, start=1):
        parts.append(_RULE)
        parts.append(f"|            [line: {line}]               |\n")
        parts.append(_RULE)
        parts.append(format_command(command))
        parts.append(_END_OF_LINE)
    return "".join(parts)