import pytest

from pmud.keccak import Keccak, KeccakBits

EMPTY_256 = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
ABC_256 = "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"


def test_empty_message_keccak256():
    assert Keccak()(b"") == EMPTY_256


def test_abc_keccak256():
    assert Keccak(KeccakBits.KECCAK256)("abc") == ABC_256


@pytest.mark.parametrize("bits", list(KeccakBits))
def test_digest_length_matches_variant(bits):
    assert len(Keccak(bits)(b"hello")) == bits // 4


@pytest.mark.parametrize("bits", list(KeccakBits))
@pytest.mark.parametrize("length", [0, 1, 71, 72, 73, 135, 136, 137, 144, 500])
def test_streaming_matches_one_shot(bits, length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    one_shot = Keccak(bits)(data)
    hasher = Keccak(bits)
    for start in range(0, length, 13):
        hasher.add(data[start:start + 13])
    assert hasher.hexdigest() == one_shot


def test_hexdigest_does_not_disturb_state():
    hasher = Keccak()
    hasher.add(b"ab")
    first = hasher.hexdigest()
    assert hasher.hexdigest() == first
    hasher.add(b"c")
    assert hasher.hexdigest() == ABC_256


def test_call_resets_previous_data():
    hasher = Keccak()
    hasher.add(b"leftover data")
    assert hasher(b"") == EMPTY_256


def test_reset_returns_to_empty():
    hasher = Keccak()
    hasher.add(b"something")
    hasher.reset()
    assert hasher.hexdigest() == EMPTY_256


def test_text_is_hashed_as_utf8():
    assert Keccak()("grüße") == Keccak()("grüße".encode("utf-8"))


def test_variants_give_different_results():
    digests = {Keccak(bits)(b"abc")[:56] for bits in KeccakBits}
    assert len(digests) == len(KeccakBits)


def test_integer_bits_accepted():
    assert Keccak(256)(b"abc") == ABC_256


def test_invalid_bits_rejected():
    with pytest.raises(ValueError):
        Keccak(128)


def test_block_size_per_variant():
    assert [Keccak(bits).block_size for bits in KeccakBits] == [144, 136, 104, 72]