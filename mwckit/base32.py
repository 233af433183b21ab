"""Lower-case RFC 4648 base32 encoding with '=' padding."""

import base64

ALPHABET = "abcdefghijklmnopqrstuvwxyz234567"
PADDING = "="

_BITS_PER_CHARACTER = 5
_BITS_PER_BYTE = 8
_VALUES = {character: value for value, character in enumerate(ALPHABET)}


def _padding_count(length: int) -> int:
    """Return how many padding characters follow the encoding of ``length`` bytes."""
    return {1: 6, 2: 4, 3: 3, 4: 1}.get(length % _BITS_PER_CHARACTER, 0)


def encoded_length(length: int) -> int:
    """Return the length of the base32 encoding of ``length`` bytes, padding included."""
    if length < 0:
        raise ValueError("length must not be negative")
    partial = 1 if length % _BITS_PER_CHARACTER else 0
    return length * _BITS_PER_BYTE // _BITS_PER_CHARACTER + partial + _padding_count(length)


def encode(data: bytes) -> str:
    """Encode ``data`` as padded lower-case base32."""
    return base64.b32encode(bytes(data)).decode("ascii").lower()


def _validate(text: str) -> tuple[int, str]:
    """Check ``text`` and return its decoded length and its non-padding part."""
    start = text.find(PADDING)
    body = text if start < 0 else text[:start]
    padding = "" if start < 0 else text[start:]
    if padding.strip(PADDING):
        raise ValueError("base32 padding is followed by other characters")
    number_of_bytes = len(body) * _BITS_PER_CHARACTER // _BITS_PER_BYTE
    if _padding_count(number_of_bytes) != len(padding):
        raise ValueError("base32 padding has the wrong length")
    if any(character not in _VALUES for character in body):
        raise ValueError("base32 text holds an invalid character")
    return number_of_bytes, body


def decoded_length(text: str) -> int:
    """Return the number of bytes ``text`` decodes to; raise ValueError if invalid."""
    return _validate(text)[0]


def decode(text: str) -> bytes:
    """Decode padded lower-case base32 ``text``; raise ValueError if invalid."""
    number_of_bytes, body = _validate(text)
    value = 0
    for character in body:
        value = (value << _BITS_PER_CHARACTER) | _VALUES[character]
    excess_bits = len(body) * _BITS_PER_CHARACTER - number_of_bytes * _BITS_PER_BYTE
    return (value >> excess_bits).to_bytes(number_of_bytes, "big")