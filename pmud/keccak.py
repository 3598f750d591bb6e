"""Streaming Keccak hash with the original Keccak padding."""

import struct
from enum import IntEnum

_MASK64 = 0xFFFFFFFFFFFFFFFF
_STATE_LANES = 25
_ROUNDS = 24

# (lane index, rotation) pairs of the combined rho and pi steps, in walk order.
_RHO_PI = (
    (10, 1), (7, 3), (11, 6), (17, 10), (18, 15), (3, 21), (5, 28), (16, 36),
    (8, 45), (21, 55), (24, 2), (4, 14), (15, 27), (23, 41), (19, 56), (13, 8),
    (12, 25), (2, 43), (20, 62), (14, 18), (22, 39), (9, 61), (6, 20), (1, 44),
)


def _lfsr_bit(step):
    """Output bit of the Keccak round-constant LFSR after ``step`` shifts."""
    register = 1
    for _ in range(step % 255):
        register <<= 1
        if register & 0x100:
            register ^= 0x171
    return register & 1


def _round_constants():
    constants = []
    for round_index in range(_ROUNDS):
        value = 0
        for bit in range(7):
            if _lfsr_bit(bit + 7 * round_index):
                value |= 1 << ((1 << bit) - 1)
        constants.append(value)
    return tuple(constants)


_ROUND_CONSTANTS = _round_constants()


def _rotate_left(value, count):
    return ((value << count) | (value >> (64 - count))) & _MASK64


def _permute(lanes):
    """Apply Keccak-f[1600] to the 25 lanes in place."""
    for constant in _ROUND_CONSTANTS:
        # theta
        columns = [lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
                   for x in range(5)]
        for x in range(5):
            mix = columns[(x + 4) % 5] ^ _rotate_left(columns[(x + 1) % 5], 1)
            for y in range(0, _STATE_LANES, 5):
                lanes[x + y] ^= mix

        # rho and pi
        last = lanes[1]
        for index, rotation in _RHO_PI:
            lanes[index], last = _rotate_left(last, rotation), lanes[index]

        # chi
        for y in range(0, _STATE_LANES, 5):
            row = lanes[y:y + 5]
            for x in range(5):
                lanes[y + x] = row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5])

        # iota
        lanes[0] ^= constant


def _as_bytes(data):
    """Return ``data`` as bytes; text is encoded as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return memoryview(data).cast("B").tobytes()


class KeccakBits(IntEnum):
    """Digest sizes supported by :class:`Keccak`."""

    KECCAK224 = 224
    KECCAK256 = 256
    KECCAK384 = 384
    KECCAK512 = 512


class Keccak:
    """Incremental Keccak hasher (pre-standard padding, as used before SHA-3).

    Feed data with :meth:`add` and read the result with :meth:`hexdigest`;
    reading does not disturb the running state. Calling the object hashes one
    block of data from scratch.
    """

    def __init__(self, bits=KeccakBits.KECCAK256):
        self.bits = KeccakBits(bits)
        self.block_size = 200 - 2 * (self.bits // 8)
        self._block = struct.Struct(f"<{self.block_size // 8}Q")
        self.reset()

    def reset(self):
        """Forget everything added so far."""
        self._state = [0] * _STATE_LANES
        self._num_bytes = 0
        self._buffer = bytearray()

    def _absorb(self, state, block):
        for index, lane in enumerate(self._block.unpack(block)):
            state[index] ^= lane
        _permute(state)

    def add(self, data):
        """Add bytes (or UTF-8 encoded text) to the hash."""
        self._buffer += _as_bytes(data)
        size = self.block_size
        whole = len(self._buffer) - len(self._buffer) % size
        if not whole:
            return
        view = memoryview(self._buffer)
        for start in range(0, whole, size):
            self._absorb(self._state, view[start:start + size])
        view.release()
        self._num_bytes += whole
        del self._buffer[:whole]

    def hexdigest(self):
        """Return the hash of everything added so far as lower-case hex."""
        state = list(self._state)
        tail = bytearray(self._buffer)
        tail.append(0x01)
        tail.extend(bytes(self.block_size - len(tail)))
        tail[-1] |= 0x80
        self._absorb(state, tail)
        output = b"".join(lane.to_bytes(8, "little") for lane in state)
        return output[:self.bits // 8].hex()

    def __call__(self, data):
        """Reset, hash ``data`` and return the hex digest."""
        self.reset()
        self.add(data)
        return self.hexdigest()