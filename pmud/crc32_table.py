"""Lookup tables for the slicing-by-8 CRC-32 algorithm."""

from functools import lru_cache

POLYNOMIAL = 0xEDB88320
"""Reflected form of the standard CRC-32 polynomial."""

SLICES = 8
"""Number of tables used by slicing-by-8."""

_MASK32 = 0xFFFFFFFF


@lru_cache(maxsize=None)
def build_tables(polynomial=POLYNOMIAL):
    """Return eight 256-entry CRC-32 tables for a reflected polynomial.

    The first table is the classic byte-at-a-time table; each further table
    advances the previous one by another zero byte.
    """
    if not 0 <= polynomial <= _MASK32:
        raise ValueError(f"polynomial must fit in 32 bits: {polynomial:#x}")

    first = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ (polynomial if crc & 1 else 0)
        first.append(crc)

    tables = [tuple(first)]
    for _ in range(1, SLICES):
        previous = tables[-1]
        tables.append(tuple((value >> 8) ^ first[value & 0xFF] for value in previous))
    return tuple(tables)