import pytest

from mwckit import base32

INPUT = bytes(
    [
        0x00, 0x14, 0x75, 0x1E, 0x76, 0xE8, 0x19, 0x91, 0x96, 0xD4, 0x54,
        0x94, 0x1C, 0x45, 0xD1, 0xB3, 0xA3, 0x23, 0xF1, 0x43, 0x3B, 0xD6,
    ]
)
OUTPUT = "aakhkhtw5amzdfwukskbyrorworsh4kdhpla===="


def test_encode():
    assert base32.encoded_length(len(INPUT)) == len(OUTPUT)
    assert base32.encode(INPUT) == OUTPUT


def test_decode():
    assert base32.decoded_length(OUTPUT) == len(INPUT)
    assert base32.decode(OUTPUT) == INPUT


@pytest.mark.parametrize("length, expected", [(0, 0), (1, 8), (2, 8), (3, 8), (4, 8), (5, 8), (6, 16)])
def test_encoded_length_follows_padded_blocks(length, expected):
    assert base32.encoded_length(length) == expected


@pytest.mark.parametrize("length", range(0, 21))
def test_round_trip(length):
    data = bytes((index * 37 + 11) % 256 for index in range(length))
    encoded = base32.encode(data)
    assert len(encoded) == base32.encoded_length(length)
    assert base32.decoded_length(encoded) == length
    assert base32.decode(encoded) == data


def test_encode_is_lower_case():
    encoded = base32.encode(b"\xff" * 10)
    assert encoded == encoded.lower()
    assert set(encoded) <= set(base32.ALPHABET)


def test_empty_text_decodes_to_nothing():
    assert base32.decode("") == b""


@pytest.mark.parametrize(
    "text",
    [
        "aakhkhtw5amzdfwukskbyrorworsh4kdhpla===",
        "aakhkhtw5amzdfwukskbyrorworsh4kdhpla=====",
        "AAKHKHTW5AMZDFWUKSKBYRORWORSH4KDHPLA====",
        "a=a=====",
        "aa",
        "a1======",
    ],
)
def test_invalid_text_is_rejected(text):
    with pytest.raises(ValueError):
        base32.decoded_length(text)
    with pytest.raises(ValueError):
        base32.decode(text)


def test_negative_length_is_rejected():
    with pytest.raises(ValueError):
        base32.encoded_length(-1)