"""Command that prints checksums and hashes of a file or standard input."""

import hashlib
import sys

from pmud.crc32 import CRC32
from pmud.keccak import Keccak, KeccakBits
from pmud.md5 import MD5

BUFFER_SIZE = 144 * 7 * 1024
"""Bytes read per chunk; a multiple of the Keccak block sizes."""

USAGE = "./digest filename [--crc|--md5|--sha1|--sha256|--keccak|--sha3]"

_ALGORITHMS = (
    ("CRC32", ("--crc",), CRC32),
    ("MD5", ("--md5",), MD5),
    ("SHA1", ("--sha1",), hashlib.sha1),
    ("SHA2/256", ("--sha2", "--sha256"), hashlib.sha256),
    ("Keccak/256", ("--keccak",), lambda: Keccak(KeccakBits.KECCAK256)),
    ("SHA3/256", ("--sha3",), hashlib.sha3_256),
)


def _feed(hasher, chunk):
    if hasattr(hasher, "add"):
        hasher.add(chunk)
    else:
        hasher.update(chunk)


def compute_digests(stream, algorithm=""):
    """Hash a binary stream and return ``(label, hex digest)`` pairs.

    An empty ``algorithm`` selects every algorithm; otherwise only the one
    named by its option (``--crc``, ``--md5``, ...). An unknown option selects
    nothing.
    """
    selected = [
        (label, factory())
        for label, options, factory in _ALGORITHMS
        if not algorithm or algorithm in options
    ]
    while chunk := stream.read(BUFFER_SIZE):
        for _label, hasher in selected:
            _feed(hasher, chunk)
    return [(label, hasher.hexdigest()) for label, hasher in selected]


def _print_results(results):
    for label, value in results:
        print(f"{label + ':':<12}{value}")


def main(argv=None):
    """Print digests of the named file (``-`` for standard input)."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not 1 <= len(args) <= 2:
        print(USAGE)
        return 1

    filename = args[0]
    algorithm = args[1] if len(args) == 2 else ""

    if filename == "-":
        _print_results(compute_digests(sys.stdin.buffer, algorithm))
        return 0

    try:
        stream = open(filename, "rb")
    except OSError:
        print(f"Can't open '{filename}'", file=sys.stderr)
        return 2
    with stream:
        results = compute_digests(stream, algorithm)
    _print_results(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())