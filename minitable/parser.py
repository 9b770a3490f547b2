"""Turn a token stream into a table of commands, one per pipeline stage."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Iterable

from .tokens import Token, TokenType

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class SyntaxFailure(ValueError):
    """Raised when the token stream cannot form a command."""


@dataclass
class Command:
    """One pipeline stage: its arguments and its redirections."""

    args: list[str] = field(default_factory=list)
    red_symbols: list[str] = field(default_factory=list)
    filenames: list[str] = field(default_factory=list)


def count_lines(tokens: Iterable[Token]) -> int:
    """Number of table lines a token stream asks for: pipes plus one."""
    return sum(1 for token in tokens if token.type is TokenType.PIPE) + 1


def split_segments(tokens: Iterable[Token]) -> list[list[Token]]:
    """Split tokens at pipes; an empty segment after the last pipe is dropped."""
    segments: list[list[Token]] = [[]]
    for token in tokens:
        if token.type is TokenType.PIPE:
            segments.append([])
        else:
            segments[-1].append(token)
    if not segments[-1]:
        segments.pop()
    return segments


def build_command(segment: Iterable[Token]) -> Command:
    """Build one command from the tokens of a single pipeline stage.

    The first argument is lowercased (ASCII letters only). Every redirection
    must be followed by a token that can name a file.
    """
    command = Command()
    tokens = iter(segment)
    for token in tokens:
        if token.type is TokenType.PIPE:
            break
        if token.is_redirection():
            target = next(tokens, None)
            if target is None or not target.is_filename():
                near = "newline" if target is None else target.value
                raise SyntaxFailure(f"syntax error near unexpected token `{near}'")
            command.red_symbols.append(token.value)
            command.filenames.append(target.value)
        elif not command.args:
            command.args.append(token.value.translate(_ASCII_LOWER))
        else:
            command.args.append(token.value)
    return command


def parse(tokens: Iterable[Token]) -> list[Command]:
    """Parse a whole token stream into its command table."""
    return [build_command(segment) for segment in split_segments(list(tokens))]