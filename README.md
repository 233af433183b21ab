# mwckit

Small building blocks for MimbleWimble Coin wallet software, written against
the Python standard library only:

- `mwckit.base32`: lower-case RFC 4648 base32 with `=` padding
- `mwckit.base58`: Bitcoin-style base58, with and without a four-byte
  double-SHA256 checksum
- `mwckit.blake2b`: BLAKE2b hashing with a chosen output length and an
  optional key
- `mwckit.chacha20_poly1305`: ChaCha20-Poly1305 that processes one keystream
  block per call, starting from a caller-chosen block counter, plus access to
  the raw ChaCha20 block output

## Installation

```
pip install .
```

Run the test suite with:

```
pip install .[test]
pytest
```

## Usage

### Base32

```python
from mwckit import base32

text = base32.encode(b"\x00\x14\x75")
assert base32.decode(text) == b"\x00\x14\x75"
base32.encoded_length(3)      # length of the encoded text, padding included
base32.decoded_length(text)   # number of bytes the text decodes to
```

`decode` and `decoded_length` accept only the lower-case alphabet
`abcdefghijklmnopqrstuvwxyz234567`. They raise `ValueError` for a character
outside it, for padding of the wrong length, or for anything other than `=`
after the first `=`. `encoded_length` raises `ValueError` for a negative length.

### Base58

```python
from mwckit import base58

text = base58.encode(b"\x00\x14\x75\x1e")
assert base58.decode(text) == b"\x00\x14\x75\x1e"

checked = base58.encode_with_checksum(b"payload")
assert base58.decode_with_checksum(checked) == b"payload"
```

Each leading zero byte is encoded as `1`, and each leading `1` decodes back to
a zero byte.

- `checksum(data)` returns the first four bytes of SHA-256(SHA-256(data)).
- `encode_with_checksum(data)` encodes `data` followed by its checksum.
- `decode_with_checksum(text)` returns the payload without its checksum and
  raises `base58.ChecksumError` (a subclass of `ValueError`) when the checksum
  does not match.
- `encoded_length`, `encoded_length_with_checksum`, `decoded_length` and
  `decoded_length_with_checksum` return the lengths of the corresponding
  results; `decoded_length_with_checksum` counts the checksum bytes.

Invalid characters raise `ValueError`, as does checksummed text that decodes
to fewer than four bytes.

### BLAKE2b

```python
from mwckit.blake2b import blake2b

digest = blake2b(b"message", 32)
keyed = blake2b(b"message", 32, bytes(range(32)))
```

The output length must be between 1 and 64 bytes and a key, when given,
between 1 and 64 bytes; otherwise `ValueError` is raised.

### ChaCha20-Poly1305

```python
from mwckit.chacha20_poly1305 import ChaCha20Poly1305, chacha20_resulting_state

key = bytes(range(32))
nonce = bytes(range(12))

sender = ChaCha20Poly1305(key, nonce, b"header", 0)
ciphertext = sender.encrypt(b"first chunk") + sender.encrypt(b"second chunk")
tag = sender.tag()

receiver = ChaCha20Poly1305(key, nonce, b"header", 0)
plaintext = receiver.decrypt(ciphertext[:11]) + receiver.decrypt(ciphertext[11:])
assert plaintext == b"first chunksecond chunk"
assert receiver.tag() == tag
```

The block at the starting counter provides the Poly1305 key; every call to
`encrypt` or `decrypt` then moves to the next ChaCha20 block and uses it for
that chunk alone. Each chunk must therefore be at most 64 bytes, and both
sides must split the data the same way. `tag()` can be read at any point
without changing the state.

The key must be 32 bytes, the nonce 12 bytes and the counter must fit in
32 bits; the additional authenticated data defaults to empty and the counter
to 0. `ValueError` is raised for wrong sizes, for a chunk over 64 bytes, and
when the block counter or the total data length would overflow.

`chacha20_resulting_state(key, nonce, counter)` returns the sixteen 32-bit
words of the ChaCha20 block for the given counter (0 by default).

## What this package does not do

It provides encodings and primitives only. It does not talk to signing
devices, hold or derive wallet keys, build or sign transactions, produce
wallet addresses, or offer a command-line tool.