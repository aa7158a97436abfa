"""UTF-8 conversion helpers with the lenient rules used by the game's data files."""

from __future__ import annotations

__all__ = ["ConversionError", "to_utf8", "from_utf8", "get_utf8_length"]


class ConversionError(ValueError):
    """Raised when text cannot be converted to or from UTF-8."""


# (mask that selects the marker bits, expected marker, sequence length, payload mask)
_LEAD_BYTES = (
    (0xE0, 0xC0, 2, 0x1F),
    (0xF0, 0xE0, 3, 0x0F),
    (0xF8, 0xF0, 4, 0x07),
    (0xFC, 0xF8, 5, 0x03),
    (0xFE, 0xFC, 6, 0x01),
)


def _encoded_length(code_point: int) -> int:
    """Number of bytes the shortest UTF-8 form of a code point takes."""
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    if code_point < 0x200000:
        return 4
    if code_point < 0x4000000:
        return 5
    return 6


def _lead_info(first_byte: int) -> tuple[int, int] | None:
    """Return (sequence length, payload mask) for a lead byte, or None if invalid."""
    if first_byte < 0x80:
        return 1, 0x7F
    for select, marker, length, mask in _LEAD_BYTES:
        if first_byte & select == marker:
            return length, mask
    return None


def get_utf8_length(first_byte: int) -> int:
    """Return the byte length of a UTF-8 sequence from its first byte."""
    if not 0 <= first_byte <= 0xFF:
        raise ConversionError("Invalid utf-8 character")
    info = _lead_info(first_byte)
    if info is None:
        raise ConversionError("Invalid utf-8 character")
    return info[0]


def to_utf8(text: str) -> bytes:
    """Encode text as UTF-8; the text ends at its first NUL character."""
    text = text.split("\0", 1)[0]
    try:
        return text.encode("utf-8", "surrogatepass")
    except UnicodeEncodeError as err:  # pragma: no cover - surrogatepass covers all str
        raise ConversionError("Error converting text to UTF-8") from err


def from_utf8(data: bytes | bytearray | memoryview) -> str:
    """Decode UTF-8 bytes.

    Decoding stops at the first NUL byte, and an incomplete character at the
    very end of the input is dropped. Malformed or overlong sequences raise
    ConversionError.
    """
    raw = bytes(data).split(b"\0", 1)[0]
    size = len(raw)
    chars: list[str] = []
    pos = 0
    while pos < size:
        info = _lead_info(raw[pos])
        if info is None or 0x80 <= raw[pos] < 0xC0:
            raise ConversionError("Invalid byte sequence in conversion input")
        length, mask = info
        tail = raw[pos + 1 : pos + length]
        if any(byte & 0xC0 != 0x80 for byte in tail):
            raise ConversionError("Invalid byte sequence in conversion input")
        if length > size - pos:
            break  # partial character at the end of the input
        code_point = raw[pos] & mask
        for byte in tail:
            code_point = (code_point << 6) | (byte & 0x3F)
        if _encoded_length(code_point) != length:
            raise ConversionError("Invalid byte sequence in conversion input")
        if code_point > 0x10FFFF:
            raise ConversionError("Character out of range for Unicode")
        chars.append(chr(code_point))
        pos += length
    return "".join(chars)