"""Nested key/value tables stored in a small brace-delimited text format."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from .unicode import ConversionError, from_utf8, to_utf8

__all__ = ["TableError", "ValueType", "Table"]


class TableError(Exception):
    """Raised for malformed table text, bad conversions and I/O failures."""


class ValueType(enum.Enum):
    """Kinds of values a table field can hold."""

    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    TABLE = "table"


_Value = Union[int, float, str, "Table"]


class _Kind(enum.Enum):
    IDENT = enum.auto()
    STRING = enum.auto()
    INTEGER = enum.auto()
    FLOAT = enum.auto()
    SYMBOL = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class _Lexeme:
    kind: _Kind
    content: str
    line: int
    pos: int


def _pos_str(line: int, pos: int) -> str:
    return f"{line}:{pos}"


_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "'": "'", '"': '"', "\\": "\\"}


class _Lexer:
    """Splits table text into identifiers, literals and one-character symbols."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0
        self._line = 1
        self._pos = 1

    def _peek(self, offset: int = 0) -> str:
        index = self._index + offset
        return self._text[index] if index < len(self._text) else ""

    def _advance(self) -> str:
        ch = self._text[self._index]
        self._index += 1
        if ch == "\n":
            self._line += 1
            self._pos = 1
        else:
            self._pos += 1
        return ch

    def next(self) -> _Lexeme:
        while self._peek() and self._peek().isspace():
            self._advance()
        line, pos = self._line, self._pos
        ch = self._peek()
        if not ch:
            return _Lexeme(_Kind.EOF, "", line, pos)
        if ch.isalpha() or ch == "_":
            start = self._index
            while self._peek() and (self._peek().isalnum() or self._peek() == "_"):
                self._advance()
            return _Lexeme(_Kind.IDENT, self._text[start : self._index], line, pos)
        if ch.isdigit() or (ch == "-" and self._peek(1).isdigit()):
            return self._number(line, pos)
        if ch in "\"'":
            return self._string(line, pos)
        self._advance()
        return _Lexeme(_Kind.SYMBOL, ch, line, pos)

    def _digits(self) -> None:
        while self._peek().isdigit():
            self._advance()

    def _number(self, line: int, pos: int) -> _Lexeme:
        start = self._index
        is_float = False
        if self._peek() == "-":
            self._advance()
        self._digits()
        if self._peek() == "." and self._peek(1).isdigit():
            is_float = True
            self._advance()
            self._digits()
        if self._peek() in ("e", "E") and (
            self._peek(1).isdigit()
            or (self._peek(1) in "+-" and self._peek(1) and self._peek(2).isdigit())
        ):
            is_float = True
            self._advance()
            if self._peek() in "+-":
                self._advance()
            self._digits()
        kind = _Kind.FLOAT if is_float else _Kind.INTEGER
        return _Lexeme(kind, self._text[start : self._index], line, pos)

    def _string(self, line: int, pos: int) -> _Lexeme:
        quote = self._advance()
        chars: list[str] = []
        while True:
            ch = self._peek()
            if not ch:
                raise TableError(f"Unterminated string at {_pos_str(line, pos)}")
            self._advance()
            if ch == quote:
                return _Lexeme(_Kind.STRING, "".join(chars), line, pos)
            if ch == "\\":
                escaped = self._peek()
                if not escaped:
                    raise TableError(f"Unterminated string at {_pos_str(line, pos)}")
                self._advance()
                chars.append(_ESCAPES.get(escaped, escaped))
            else:
                chars.append(ch)


def _format_number(value: Union[int, float]) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _encode_string(text: str) -> str:
    replacements = {"\n": "\\n", "\r": "\\r", "'": "\\'", '"': '\\"', "\\": "\\\\"}
    return '"' + "".join(replacements.get(ch, ch) for ch in text) + '"'


def _value_type(value: _Value) -> ValueType:
    if isinstance(value, Table):
        return ValueType.TABLE
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, float):
        return ValueType.DOUBLE
    return ValueType.INTEGER


def _to_int(value: _Value) -> int:
    if isinstance(value, Table):
        raise TableError("Can't convert table to int")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as err:
            raise TableError(f"Can't convert '{value}' to int") from err
    return int(value)


def _to_double(value: _Value) -> float:
    if isinstance(value, Table):
        raise TableError("Can't convert table to double")
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as err:
            raise TableError(f"Can't convert '{value}' to double") from err
    return float(value)


def _to_string(value: _Value) -> str:
    if isinstance(value, Table):
        raise TableError("Can't convert table to string")
    if isinstance(value, str):
        return value
    return _format_number(value)


class Table:
    """An ordered-by-key collection of named or indexed values."""

    def __init__(self) -> None:
        self._fields: dict[str, _Value] = {}
        self._last_array_index = 0

    @classmethod
    def parse(cls, text: str) -> Table:
        """Build a table from its text form (without surrounding braces)."""
        table = cls()
        table._parse(_Lexer(text), False, 0, 0)
        return table

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Table:
        """Read and parse a UTF-8 table file."""
        try:
            with open(path, "rb") as stream:
                data = stream.read()
        except OSError as err:
            raise TableError(f"Error opening file '{os.fspath(path)}'") from err
        try:
            text = from_utf8(data)
        except ConversionError as err:
            raise TableError(str(err)) from err
        return cls.parse(text)

    def copy(self) -> Table:
        """Return a deep copy; nested tables are copied too."""
        other = Table()
        other._last_array_index = self._last_array_index
        other._fields = {
            key: value.copy() if isinstance(value, Table) else value
            for key, value in self._fields.items()
        }
        return other

    # --- parsing -----------------------------------------------------------

    def _lex_to_value(self, lexer: _Lexer, lexeme: _Lexeme) -> _Value:
        kind = lexeme.kind
        if kind in (_Kind.IDENT, _Kind.STRING):
            return lexeme.content
        if kind is _Kind.INTEGER:
            return int(lexeme.content)
        if kind is _Kind.FLOAT:
            return float(lexeme.content)
        if kind is _Kind.SYMBOL and lexeme.content == "{":
            nested = Table()
            nested._parse(lexer, True, lexeme.line, lexeme.pos)
            return nested
        raise TableError(
            f"Invalid lexeme type at {_pos_str(lexeme.line, lexeme.pos)}"
        )

    def _add_value_pair(self, lexer: _Lexer, name: str) -> None:
        lexeme = lexer.next()
        if lexeme.kind is _Kind.EOF:
            raise TableError("Unexpected end of file")
        self._fields[name] = self._lex_to_value(lexer, lexeme)

    def _add_array_element(self, lexer: _Lexer, lexeme: _Lexeme) -> None:
        self._fields[str(self._last_array_index)] = self._lex_to_value(lexer, lexeme)
        self._last_array_index += 1

    def _parse(
        self, lexer: _Lexer, need_bracket: bool, start_line: int, start_pos: int
    ) -> None:
        pending: _Lexeme | None = None
        while True:
            lexeme = pending if pending is not None else lexer.next()
            pending = None
            kind = lexeme.kind
            if kind is _Kind.EOF:
                if not need_bracket:
                    return
                raise TableError(
                    f"Table started at {_pos_str(start_line, start_pos)} "
                    "is never finished"
                )
            if kind is _Kind.SYMBOL and lexeme.content == "}" and need_bracket:
                return
            if kind is _Kind.SYMBOL and lexeme.content in (",", ";"):
                continue
            if kind is _Kind.IDENT:
                following = lexer.next()
                if following.kind is not _Kind.SYMBOL:
                    raise TableError(
                        f"Unexpected token at {_pos_str(start_line, start_pos)}"
                    )
                if following.content == "=":
                    self._add_value_pair(lexer, lexeme.content)
                else:
                    self._add_array_element(lexer, lexeme)
                    pending = following
            else:
                self._add_array_element(lexer, lexeme)

    # --- access ------------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[str, _Value]]:
        """Yield (key, value) pairs in key order."""
        for key in sorted(self._fields):
            yield key, self._fields[key]

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def has_key(self, key: str) -> bool:
        """True if the table has a field with this name."""
        return key in self._fields

    def get_type(self, key: str) -> ValueType:
        """Return the type of a field; raises TableError if it is missing."""
        if key not in self._fields:
            raise TableError(f"Field '{key}' doesn't exists in the table")
        return _value_type(self._fields[key])

    def get_string(self, key: str, default: str = "") -> str:
        """Return a field as text, or the default if it is missing."""
        if key not in self._fields:
            return default
        return _to_string(self._fields[key])

    def get_int(self, key: str, default: int = 0) -> int:
        """Return a field as an integer, or the default if it is missing."""
        if key not in self._fields:
            return default
        return _to_int(self._fields[key])

    def get_double(self, key: str, default: float = 0.0) -> float:
        """Return a field as a float, or the default if it is missing."""
        if key not in self._fields:
            return default
        return _to_double(self._fields[key])

    def get_table(self, key: str, default: Table | None = None) -> Table | None:
        """Return a nested table, or the default if the field is missing."""
        if key not in self._fields:
            return default
        value = self._fields[key]
        if not isinstance(value, Table):
            raise TableError(f"Can't convert {_value_type(value).value} to table")
        return value

    def set_string(self, key: str, value: str) -> None:
        """Store a string field, replacing any previous value."""
        self._fields[key] = str(value)

    def set_int(self, key: str, value: int) -> None:
        """Store an integer field, replacing any previous value."""
        self._fields[key] = int(value)

    # --- output ------------------------------------------------------------

    def is_array(self) -> bool:
        """True if the keys are exactly 0..len-1."""
        return all(str(i) in self._fields for i in range(len(self._fields)))

    def _print_value(self, value: _Value, beautify: bool, spaces: int) -> str:
        if isinstance(value, Table):
            return value.to_string(True, beautify, spaces)
        if isinstance(value, str):
            return _encode_string(value)
        if isinstance(value, float):
            text = _format_number(value)
            return text if "." in text else text + ".0"
        return str(value)

    def to_string(
        self, print_braces: bool = False, beautify: bool = True, spaces: int = 0
    ) -> str:
        """Render the table in its text form."""
        parts: list[str] = []
        if print_braces:
            parts.append("{\n" if beautify else "{")
        print_names = not self.is_array()
        for name, value in self:
            parts.append(" " * spaces if beautify else " ")
            if print_names and not name.isdigit() or (print_names and name == ""):
                parts.append(f"{name} = ")
            parts.append(self._print_value(value, beautify, spaces + 4))
            if print_names:
                parts.append(";\n" if beautify else ";")
            else:
                parts.append(",\n" if beautify else ",")
        if print_braces:
            if beautify:
                parts.append(" " * max(spaces - 4, 0) + "}")
            else:
                parts.append(" }")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string(False, True, 0)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the table to a file as UTF-8."""
        data = to_utf8(str(self))
        try:
            with open(path, "wb") as stream:
                stream.write(data)
        except OSError as err:
            raise TableError(
                f"Can't write table to file '{os.fspath(path)}'"
            ) from err