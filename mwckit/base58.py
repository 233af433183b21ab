"""Base58 encoding, with and without a double SHA-256 checksum."""

import hashlib

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
CHECKSUM_SIZE = 4

_BASE = len(ALPHABET)
_VALUES = {character: value for value, character in enumerate(ALPHABET)}


class ChecksumError(ValueError):
    """Raised when a base58 checksum does not match its payload."""


def checksum(data: bytes) -> bytes:
    """Return the first four bytes of SHA-256(SHA-256(data))."""
    return hashlib.sha256(hashlib.sha256(bytes(data)).digest()).digest()[:CHECKSUM_SIZE]


def encode(data: bytes) -> str:
    """Encode ``data`` as base58, each leading zero byte becoming '1'."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    value = int.from_bytes(stripped, "big")
    digits = []
    while value:
        value, remainder = divmod(value, _BASE)
        digits.append(ALPHABET[remainder])
    return ALPHABET[0] * (len(data) - len(stripped)) + "".join(reversed(digits))


def encoded_length(data: bytes) -> int:
    """Return the length of the base58 encoding of ``data``."""
    return len(encode(data))


def encode_with_checksum(data: bytes) -> str:
    """Encode ``data`` followed by its checksum as base58."""
    data = bytes(data)
    return encode(data + checksum(data))


def encoded_length_with_checksum(data: bytes) -> int:
    """Return the length of the checksummed base58 encoding of ``data``."""
    return len(encode_with_checksum(data))


def decode(text: str) -> bytes:
    """Decode base58 ``text``; raise ValueError on an invalid character."""
    stripped = text.lstrip(ALPHABET[0])
    value = 0
    for character in stripped:
        try:
            digit = _VALUES[character]
        except KeyError:
            raise ValueError(f"invalid base58 character {character!r}") from None
        value = value * _BASE + digit
    body = value.to_bytes((value.bit_length() + 7) // 8, "big")
    return b"\0" * (len(text) - len(stripped)) + body


def decoded_length(text: str) -> int:
    """Return the number of bytes ``text`` decodes to."""
    return len(decode(text))


def _decode_checked_length(text: str) -> bytes:
    decoded = decode(text)
    if len(decoded) < CHECKSUM_SIZE:
        raise ValueError("base58 text is too short to hold a checksum")
    return decoded


def decoded_length_with_checksum(text: str) -> int:
    """Return the decoded length of ``text``, checksum included."""
    return len(_decode_checked_length(text))


def decode_with_checksum(text: str) -> bytes:
    """Decode checksummed base58 ``text`` and return the payload without its checksum."""
    decoded = _decode_checked_length(text)
    payload, expected = decoded[:-CHECKSUM_SIZE], decoded[-CHECKSUM_SIZE:]
    if checksum(payload) != expected:
        raise ChecksumError("base58 checksum does not match")
    return payload