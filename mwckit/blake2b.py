"""BLAKE2b hashing with a chosen output length and optional key."""

import hashlib

MAX_OUTPUT_LENGTH = hashlib.blake2b.MAX_DIGEST_SIZE
MAX_KEY_LENGTH = hashlib.blake2b.MAX_KEY_SIZE


def blake2b(data: bytes, output_length: int, key: bytes | None = None) -> bytes:
    """Return the BLAKE2b hash of ``data`` of ``output_length`` bytes, keyed if ``key`` is given."""
    if not 1 <= output_length <= MAX_OUTPUT_LENGTH:
        raise ValueError(f"output length must be between 1 and {MAX_OUTPUT_LENGTH}")
    if key is None:
        return hashlib.blake2b(bytes(data), digest_size=output_length).digest()
    key = bytes(key)
    if not 1 <= len(key) <= MAX_KEY_LENGTH:
        raise ValueError(f"key length must be between 1 and {MAX_KEY_LENGTH}")
    return hashlib.blake2b(bytes(data), digest_size=output_length, key=key).digest()