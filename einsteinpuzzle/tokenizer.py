"""Splitting of rule text into words and paragraph breaks."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["TokenType", "Token", "Tokenizer"]

_WHITESPACE = frozenset(" \n\r\t\f\v")


class TokenType(enum.Enum):
    """Kinds of tokens produced by the tokenizer."""

    WORD = "Word"
    PARA = "Para"
    EOF = "Eof"


@dataclass(frozen=True)
class Token:
    """A single token: a word, a paragraph break or the end of text."""

    type: TokenType
    content: str = ""

    def __str__(self) -> str:
        if self.type is TokenType.WORD:
            return f"Word: '{self.content}'"
        return self.type.value


class Tokenizer:
    """Produces words and paragraph breaks (blank lines) from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._pending: deque[Token] = deque()

    def _skip_spaces(self, no_search: bool) -> bool:
        """Skip whitespace; report whether a blank line was passed."""
        text = self._text
        size = len(text)
        found_paragraph = False
        while self._pos < size and text[self._pos] in _WHITESPACE:
            self._pos += 1
            if (
                not no_search
                and text[self._pos - 1] == "\n"
                and self._pos < size
                and text[self._pos] == "\n"
            ):
                no_search = found_paragraph = True
        return found_paragraph

    def next_token(self) -> Token:
        """Return the next token, or an EOF token when the text is exhausted."""
        if self._pending:
            return self._pending.popleft()
        size = len(self._text)
        if self._skip_spaces(self._pos == 0) and self._pos < size:
            return Token(TokenType.PARA)
        if self._pos >= size:
            return Token(TokenType.EOF)
        start = self._pos
        while self._pos < size and self._text[self._pos] not in _WHITESPACE:
            self._pos += 1
        return Token(TokenType.WORD, self._text[start : self._pos])

    def unget(self, token: Token) -> None:
        """Queue a token to be returned before any further text is read."""
        self._pending.append(token)

    def is_finished(self) -> bool:
        """True when no queued tokens remain and the text has been consumed."""
        if self._pending:
            return False
        return self._pos >= len(self._text)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token