"""Streaming CRC-32 checksum using the slicing-by-8 algorithm."""

import struct

from pmud.crc32_table import build_tables

_MASK32 = 0xFFFFFFFF
_PAIR = struct.Struct("<II")


def _as_bytes(data):
    """Return ``data`` as a byte view; text is encoded as UTF-8."""
    if isinstance(data, str):
        return memoryview(data.encode("utf-8"))
    return memoryview(data).cast("B")


class CRC32:
    """Incremental CRC-32 (IEEE 802.3) hasher.

    Feed data with :meth:`add` and read the result with :meth:`hexdigest` or
    :meth:`digest`. Calling the object hashes one block of data from scratch.
    """

    HASH_BYTES = 4
    """Length of the checksum in bytes."""

    def __init__(self):
        self._tables = build_tables()
        self._hash = 0

    def reset(self):
        """Forget everything added so far."""
        self._hash = 0

    def add(self, data):
        """Add bytes (or UTF-8 encoded text) to the checksum."""
        view = _as_bytes(data)
        t0, t1, t2, t3, t4, t5, t6, t7 = self._tables
        crc = ~self._hash & _MASK32

        whole = len(view) - len(view) % 8
        for one, two in _PAIR.iter_unpack(view[:whole]):
            one ^= crc
            crc = (
                t7[one & 0xFF]
                ^ t6[(one >> 8) & 0xFF]
                ^ t5[(one >> 16) & 0xFF]
                ^ t4[one >> 24]
                ^ t3[two & 0xFF]
                ^ t2[(two >> 8) & 0xFF]
                ^ t1[(two >> 16) & 0xFF]
                ^ t0[two >> 24]
            )

        for byte in view[whole:]:
            crc = (crc >> 8) ^ t0[(crc & 0xFF) ^ byte]

        self._hash = ~crc & _MASK32

    @property
    def value(self):
        """The current checksum as an unsigned 32-bit integer."""
        return self._hash

    def hexdigest(self):
        """Return the current checksum as 8 lower-case hex characters."""
        return f"{self._hash:08x}"

    def digest(self):
        """Return the current checksum as 4 big-endian bytes."""
        return self._hash.to_bytes(self.HASH_BYTES, "big")

    def __call__(self, data):
        """Reset, hash ``data`` and return the hex checksum."""
        self.reset()
        self.add(data)
        return self.hexdigest()