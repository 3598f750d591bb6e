import hashlib

import pytest

from pmud.md5 import MD5


def test_empty_input_digest():
    assert MD5().hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


@pytest.mark.parametrize("length", [0, 1, 3, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_reference_for_lengths(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert MD5()(data) == hashlib.md5(data).hexdigest()


def test_streaming_equals_one_shot():
    data = bytes(range(256)) * 5
    hasher = MD5()
    for start in range(0, len(data), 37):
        hasher.add(data[start:start + 37])
    assert hasher.hexdigest() == MD5()(data)


def test_digest_does_not_disturb_state():
    hasher = MD5()
    hasher.add(b"first part ")
    midway = hasher.hexdigest()
    hasher.add(b"second part")
    assert midway == hashlib.md5(b"first part ").hexdigest()
    assert hasher.hexdigest() == hashlib.md5(b"first part second part").hexdigest()


def test_digest_bytes_and_hex_agree():
    hasher = MD5()
    hasher.add(b"Hello World")
    raw = hasher.digest()
    assert len(raw) == MD5.HASH_BYTES
    assert raw.hex() == hasher.hexdigest()
    assert raw == hashlib.md5(b"Hello World").digest()


def test_text_is_encoded_as_utf8():
    text = "Grüße aus Primordia"
    assert MD5()(text) == hashlib.md5(text.encode("utf-8")).hexdigest()


def test_call_resets_previous_data():
    hasher = MD5()
    hasher.add(b"leftover")
    assert hasher(b"abc") == hashlib.md5(b"abc").hexdigest()


def test_reset_returns_to_empty():
    hasher = MD5()
    hasher.add(b"something")
    hasher.reset()
    assert hasher.hexdigest() == hashlib.md5(b"").hexdigest()


def test_accepts_bytearray_and_memoryview():
    data = b"How are you"
    hasher = MD5()
    hasher.add(bytearray(data[:4]))
    hasher.add(memoryview(data[4:]))
    assert hasher.hexdigest() == hashlib.md5(data).hexdigest()