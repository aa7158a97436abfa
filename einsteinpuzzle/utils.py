"""Small helpers: time formatting, gamma adjustment, directories and binary I/O."""

from __future__ import annotations

import functools
import os
from typing import BinaryIO

from .unicode import from_utf8, to_utf8

__all__ = [
    "sec_to_str",
    "adjust_brightness",
    "adjust_color",
    "ensure_dir_exists",
    "read_int",
    "decode_int",
    "write_int",
    "read_string",
    "write_string",
]

_INT_SIZE = 4


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def sec_to_str(seconds: int) -> str:
    """Format a number of seconds as HH:MM:SS."""
    hours = _trunc_div(seconds, 3600)
    rest = seconds - hours * 3600
    minutes = _trunc_div(rest, 60)
    secs = rest - minutes * 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def adjust_brightness(value: int, k: float) -> int:
    """Apply a gamma of k to a colour component in the range 0..255."""
    result = int(255.0 * pow(value / 255.0, 1.0 / k) + 0.5)
    return min(result, 255)


@functools.lru_cache(maxsize=8)
def _gamma_table(k: float) -> tuple[int, ...]:
    return tuple(adjust_brightness(i, k) for i in range(256))


def adjust_color(r: int, g: int, b: int, k: float) -> tuple[int, int, int]:
    """Apply a gamma of k to each component of an RGB colour."""
    table = _gamma_table(k)
    return table[r], table[g], table[b]


def ensure_dir_exists(path: str | os.PathLike[str]) -> None:
    """Make sure path is a directory, removing a plain file in its way."""
    if os.path.exists(path):
        if os.path.isdir(path):
            return
        os.unlink(path)
    try:
        os.mkdir(path, 0o700)
    except FileExistsError:
        pass


def decode_int(buffer: bytes | bytearray | memoryview) -> int:
    """Decode a 4-byte little-endian signed integer from the start of a buffer."""
    data = bytes(buffer[:_INT_SIZE])
    if len(data) < _INT_SIZE:
        raise EOFError("Error reading string")
    return int.from_bytes(data, "little", signed=True)


def read_int(stream: BinaryIO) -> int:
    """Read a 4-byte little-endian signed integer from a binary stream."""
    data = stream.read(_INT_SIZE)
    if data is None or len(data) < _INT_SIZE:
        raise EOFError("Error reading string")
    return decode_int(data)


def write_int(stream: BinaryIO, value: int) -> None:
    """Write an integer as 4 little-endian bytes (two's complement)."""
    stream.write((value & 0xFFFFFFFF).to_bytes(_INT_SIZE, "little"))


def read_string(stream: BinaryIO) -> str:
    """Read a NUL-terminated UTF-8 string from a binary stream."""
    collected = bytearray()
    while True:
        byte = stream.read(1)
        if not byte:
            raise EOFError("Error reading string")
        if byte == b"\0":
            return from_utf8(bytes(collected))
        collected += byte


def write_string(stream: BinaryIO, value: str) -> None:
    """Write a string as UTF-8 followed by a NUL byte."""
    stream.write(to_utf8(value) + b"\0")