"""Base32, base58, BLAKE2b and ChaCha20-Poly1305 for MimbleWimble Coin wallets."""

__version__ = "7.5.0"
__all__ = ["base32", "base58", "blake2b", "chacha20_poly1305"]