"""Z85 (ZeroMQ base85) encoding and the 32-byte key type it serialises."""

from __future__ import annotations

import struct
from typing import Optional, Union

from .authority import ParseError, first_token

KEY_SIZE = 32
NULL_KEY = bytes(KEY_SIZE)

_ALPHABET = (
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    ".-:+=^!/*?&<>()[]{}@%$#"
)
_DIGITS = {char: digit for digit, char in enumerate(_ALPHABET)}
_WORD = struct.Struct(">I")


def encode_z85(data: bytes) -> str:
    """Encode data as Z85; the length must be a multiple of four."""
    if len(data) % 4:
        raise ValueError("z85 input length must be a multiple of 4")
    chars = []
    for (value,) in _WORD.iter_unpack(bytes(data)):
        group = []
        for _ in range(5):
            value, digit = divmod(value, 85)
            group.append(_ALPHABET[digit])
        chars.extend(reversed(group))
    return "".join(chars)


def decode_z85(text: str) -> bytes:
    """Decode Z85 text; the length must be a multiple of five."""
    if len(text) % 5:
        raise ValueError("z85 text length must be a multiple of 5")
    out = bytearray()
    for start in range(0, len(text), 5):
        value = 0
        for char in text[start:start + 5]:
            digit = _DIGITS.get(char)
            if digit is None:
                raise ValueError(f"invalid z85 character: {char!r}")
            value = value * 85 + digit
        if value > 0xFFFFFFFF:
            raise ValueError("z85 group out of range")
        out += _WORD.pack(value)
    return bytes(out)


class Sodium:
    """A 32-byte key, written as 40 characters of Z85 text."""

    __slots__ = ("_value",)

    def __init__(self, value: Optional[Union[str, bytes]] = None) -> None:
        """Build from Z85 text, from 32 raw bytes, or as the null key."""
        if value is None:
            self._value = NULL_KEY
        elif isinstance(value, str):
            token = first_token(value)
            try:
                decoded = decode_z85(token)
            except ValueError:
                raise ParseError(token) from None
            if len(decoded) != KEY_SIZE:
                raise ParseError(token)
            self._value = decoded
        else:
            raw = bytes(value)
            if len(raw) != KEY_SIZE:
                raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(raw)}")
            self._value = raw

    def to_string(self) -> str:
        """The key as Z85 text."""
        return encode_z85(self._value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Sodium({self.to_string()!r})"

    def __bytes__(self) -> bytes:
        return self._value

    def __bool__(self) -> bool:
        return self._value != NULL_KEY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sodium):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)