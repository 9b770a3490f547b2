"""Token kinds produced by the lexer and helpers that describe them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable


class TokenType(IntEnum):
    """Kind of a lexical token in a command line."""

    PIPE = 0
    REDIN = 1
    REDOUT = 2
    HEREDOC = 3
    REDAPPEND = 4
    SQUOTES = 5
    DQUOTES = 6
    ARGS = 7
    EXITSTATUS = 8
    WORD = 9


_REDIRECTIONS = frozenset(
    {TokenType.REDIN, TokenType.REDOUT, TokenType.REDAPPEND, TokenType.HEREDOC}
)

_FILENAME_KINDS = frozenset(
    {
        TokenType.WORD,
        TokenType.SQUOTES,
        TokenType.DQUOTES,
        TokenType.ARGS,
        TokenType.EXITSTATUS,
    }
)

_LABELS = {
    TokenType.PIPE: "PIPE",
    TokenType.REDIN: "REDIRECT IN",
    TokenType.REDOUT: "REDIRECT OUT",
    TokenType.HEREDOC: "HEREDOC",
    TokenType.REDAPPEND: "REDIRECTION APPEND",
    TokenType.WORD: "WORD",
}

_UNLABELLED = "(null)"


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the text it was read from."""

    type: TokenType
    value: str

    def is_redirection(self) -> bool:
        """True for <, >, >> and << tokens."""
        return self.type in _REDIRECTIONS

    def is_filename(self) -> bool:
        """True for tokens that may name a redirection target."""
        return self.type in _FILENAME_KINDS


def describe_token(token: Token) -> str:
    """Return a human-readable block describing one token."""
    label = _LABELS.get(token.type, _UNLABELLED)
    return f"Token\n Type: {label}\n Value: {token.value}\n\n"


def format_token_list(tokens: Iterable[Token]) -> str:
    """Describe every token in order."""
    return "".join(describe_token(token) for token in tokens)