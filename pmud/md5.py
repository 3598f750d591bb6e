"""Streaming MD5 message digest (RFC 1321)."""

import math
import struct

_MASK32 = 0xFFFFFFFF
_BLOCK_SIZE = 64
_WORDS = struct.Struct("<16I")
_LENGTH_OFFSET = 56

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SHIFTS = (7, 12, 17, 22) * 4 + (5, 9, 14, 20) * 4 + (4, 11, 16, 23) * 4 + (6, 10, 15, 21) * 4
_CONSTANTS = tuple(int(abs(math.sin(step + 1)) * 2**32) & _MASK32 for step in range(64))
_WORD_INDEX = (
    tuple(range(16))
    + tuple((5 * step + 1) % 16 for step in range(16))
    + tuple((3 * step + 5) % 16 for step in range(16))
    + tuple((7 * step) % 16 for step in range(16))
)


def _as_bytes(data):
    """Return ``data`` as bytes; text is encoded as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return memoryview(data).cast("B").tobytes()


def _rotate_left(value, count):
    return ((value << count) | (value >> (32 - count))) & _MASK32


def _process_block(state, block):
    """Mix one 64-byte block into ``state`` and return the new state."""
    words = _WORDS.unpack(block)
    a, b, c, d = state
    for step in range(64):
        stage = step >> 4
        if stage == 0:
            mixed = d ^ (b & (c ^ d))
        elif stage == 1:
            mixed = c ^ (d & (b ^ c))
        elif stage == 2:
            mixed = b ^ c ^ d
        else:
            mixed = c ^ (b | (~d & _MASK32))
        total = (a + mixed + _CONSTANTS[step] + words[_WORD_INDEX[step]]) & _MASK32
        a, d, c = d, c, b
        b = (b + _rotate_left(total, _SHIFTS[step])) & _MASK32
    return tuple((old + new) & _MASK32 for old, new in zip(state, (a, b, c, d)))


class MD5:
    """Incremental MD5 hasher.

    Feed data with :meth:`add` and read the result with :meth:`hexdigest` or
    :meth:`digest`; reading the digest does not disturb the running state, so
    more data may be added afterwards. Calling the object hashes one block of
    data from scratch.
    """

    BLOCK_SIZE = _BLOCK_SIZE
    """Size of one compression block in bytes."""

    HASH_BYTES = 16
    """Length of the digest in bytes."""

    def __init__(self):
        self.reset()

    def reset(self):
        """Forget everything added so far."""
        self._state = _INITIAL_STATE
        self._num_bytes = 0
        self._buffer = bytearray()

    def add(self, data):
        """Add bytes (or UTF-8 encoded text) to the digest."""
        self._buffer += _as_bytes(data)
        whole = len(self._buffer) - len(self._buffer) % _BLOCK_SIZE
        if not whole:
            return
        state = self._state
        view = memoryview(self._buffer)
        for start in range(0, whole, _BLOCK_SIZE):
            state = _process_block(state, view[start:start + _BLOCK_SIZE])
        view.release()
        self._state = state
        self._num_bytes += whole
        del self._buffer[:whole]

    def digest(self):
        """Return the digest of everything added so far as 16 bytes."""
        message_bits = (8 * (self._num_bytes + len(self._buffer))) & 0xFFFFFFFFFFFFFFFF
        tail = bytearray(self._buffer)
        tail.append(0x80)
        tail.extend(bytes((_LENGTH_OFFSET - len(tail)) % _BLOCK_SIZE))
        tail.extend(message_bits.to_bytes(8, "little"))

        state = self._state
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = _process_block(state, tail[start:start + _BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self):
        """Return the digest as 32 lower-case hex characters."""
        return self.digest().hex()

    def __call__(self, data):
        """Reset, hash ``data`` and return the hex digest."""
        self.reset()
        self.add(data)
        return self.hexdigest()