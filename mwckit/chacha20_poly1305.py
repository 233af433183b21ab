"""ChaCha20-Poly1305 authenticated encryption processed one keystream block per call."""

import struct

KEY_SIZE = 32
NONCE_SIZE = 12
BLOCK_SIZE = 64
TAG_SIZE = 16
STATE_SIZE = 16

_POLY1305_BLOCK_SIZE = 16
_POLY1305_P = (1 << 130) - 5
_POLY1305_R_CLAMP = 0x0FFFFFFC0FFFFFFC0FFFFFFC0FFFFFFF
_WORD_MASK = 0xFFFFFFFF
_MAX_COUNTER = _WORD_MASK
_MAX_DATA_LENGTH = (1 << 64) - 1
_COUNTER_INDEX = 12
_CONSTANT_WORDS = struct.unpack("<4I", b"expand 32-byte k")


def _rotate_left(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _WORD_MASK


def _quarter_round(state: list[int], a: int, b: int, c: int, d: int) -> None:
    state[a] = (state[a] + state[b]) & _WORD_MASK
    state[d] = _rotate_left(state[d] ^ state[a], 16)
    state[c] = (state[c] + state[d]) & _WORD_MASK
    state[b] = _rotate_left(state[b] ^ state[c], 12)
    state[a] = (state[a] + state[b]) & _WORD_MASK
    state[d] = _rotate_left(state[d] ^ state[a], 8)
    state[c] = (state[c] + state[d]) & _WORD_MASK
    state[b] = _rotate_left(state[b] ^ state[c], 7)


def _block(original: list[int]) -> list[int]:
    """Run the twenty ChaCha20 rounds over ``original`` and return the resulting words."""
    working = list(original)
    for _ in range(10):
        _quarter_round(working, 0, 4, 8, 12)
        _quarter_round(working, 1, 5, 9, 13)
        _quarter_round(working, 2, 6, 10, 14)
        _quarter_round(working, 3, 7, 11, 15)
        _quarter_round(working, 0, 5, 10, 15)
        _quarter_round(working, 1, 6, 11, 12)
        _quarter_round(working, 2, 7, 8, 13)
        _quarter_round(working, 3, 4, 9, 14)
    return [(mixed + initial) & _WORD_MASK for mixed, initial in zip(working, original)]


def _serialize(words: list[int]) -> bytes:
    return struct.pack(f"<{STATE_SIZE}I", *words)


def _initial_state(key: bytes, nonce: bytes, counter: int) -> list[int]:
    key = bytes(key)
    nonce = bytes(nonce)
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be {NONCE_SIZE} bytes")
    if not 0 <= counter <= _MAX_COUNTER:
        raise ValueError("counter must fit in 32 bits")
    return [
        *_CONSTANT_WORDS,
        *struct.unpack("<8I", key),
        counter,
        *struct.unpack("<3I", nonce),
    ]


def chacha20_resulting_state(key: bytes, nonce: bytes, counter: int = 0) -> tuple[int, ...]:
    """Return the sixteen ChaCha20 output words for ``key``, ``nonce`` and ``counter``."""
    return tuple(_block(_initial_state(key, nonce, counter)))


class ChaCha20Poly1305:
    """Streaming ChaCha20-Poly1305 where every call consumes one 64-byte keystream block."""

    __slots__ = ("_state", "_r", "_s", "_accumulator", "_aad_length", "_data_length")

    def __init__(
        self,
        key: bytes,
        nonce: bytes,
        additional_authenticated_data: bytes = b"",
        counter: int = 0,
    ) -> None:
        self._state = _initial_state(key, nonce, counter)
        one_time_key = _serialize(_block(self._state))
        self._r = int.from_bytes(one_time_key[:16], "little") & _POLY1305_R_CLAMP
        self._s = int.from_bytes(one_time_key[16:32], "little")
        self._accumulator = 0
        additional_authenticated_data = bytes(additional_authenticated_data)
        self._aad_length = len(additional_authenticated_data)
        self._data_length = 0
        self._accumulator = self._absorb(self._accumulator, additional_authenticated_data)

    def _absorb(self, accumulator: int, value: bytes) -> int:
        """Feed ``value`` into a Poly1305 accumulator, zero padding the last block."""
        for start in range(0, len(value), _POLY1305_BLOCK_SIZE):
            chunk = value[start:start + _POLY1305_BLOCK_SIZE].ljust(_POLY1305_BLOCK_SIZE, b"\0")
            number = int.from_bytes(chunk, "little") | (1 << (8 * _POLY1305_BLOCK_SIZE))
            accumulator = (accumulator + number) * self._r % _POLY1305_P
        return accumulator

    def _keystream(self, length: int) -> bytes:
        if length > BLOCK_SIZE:
            raise ValueError(f"data block must be at most {BLOCK_SIZE} bytes")
        if _MAX_DATA_LENGTH - self._data_length < length or self._state[_COUNTER_INDEX] == _MAX_COUNTER:
            raise ValueError("data length or block counter would overflow")
        self._state[_COUNTER_INDEX] += 1
        return _serialize(_block(self._state))

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt one block of at most 64 bytes and return the ciphertext."""
        data = bytes(data)
        keystream = self._keystream(len(data))
        encrypted = bytes(byte ^ mask for byte, mask in zip(data, keystream))
        self._accumulator = self._absorb(self._accumulator, encrypted)
        self._data_length += len(data)
        return encrypted

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt one block of at most 64 bytes and return the plaintext."""
        data = bytes(data)
        keystream = self._keystream(len(data))
        decrypted = bytes(byte ^ mask for byte, mask in zip(data, keystream))
        self._accumulator = self._absorb(self._accumulator, data)
        self._data_length += len(data)
        return decrypted

    def tag(self) -> bytes:
        """Return the Poly1305 tag for everything processed so far, leaving the state unchanged."""
        lengths = struct.pack("<QQ", self._aad_length, self._data_length)
        accumulator = self._absorb(self._accumulator, lengths)
        return ((accumulator + self._s) & ((1 << 128) - 1)).to_bytes(TAG_SIZE, "little")