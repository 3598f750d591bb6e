# pmud

Pieces of a multi-user dungeon server, using only the standard library:

- **Hashing**: streaming CRC-32 (`pmud.crc32.CRC32`, slicing-by-8 tables from
  `pmud.crc32_table.build_tables`), MD5 (`pmud.md5.MD5`) and Keccak with the
  pre-SHA-3 padding (`pmud.keccak.Keccak`, sizes in `pmud.keccak.KeccakBits`).
- **Digest command**: `pmud-digest` prints checksums and hashes of a file.
- **Helpers**: `pmud.text.replace_all` and, in `pmud.netutil`,
  `hostname_to_ip`, `make_sockaddr` and `HostResolutionError`.
- **Controllers**: `pmud.user_client.UserClient` with the `Message` enum, and
  `pmud.default_controller.DefaultController`, which answers `help` and reports
  unknown commands.

## Installation

```
pip install .
```

## Hashing

Each hasher takes bytes (text is encoded as UTF-8). `add` feeds data,
`hexdigest` reads the result without disturbing the running state, and
calling the object hashes one piece of data from scratch. `CRC32` and `MD5`
also have `digest()`, returning raw bytes.

```python
from pmud.crc32 import CRC32
from pmud.md5 import MD5
from pmud.keccak import Keccak, KeccakBits

print(CRC32()(b"Hello World"))
print(MD5()(b"Hello World"))

keccak = Keccak(KeccakBits.KECCAK256)
keccak.add(b"Hello ")
keccak.add(b"World")
print(keccak.hexdigest())
```

## Command-line digests

`pmud-digest` prints digests of a file, or of standard input when the file
name is `-`:

```
pmud-digest data.bin
pmud-digest data.bin --md5
pmud-digest - --keccak < data.bin
```

Without an option it prints CRC32, MD5, SHA1, SHA2/256, Keccak/256 and
SHA3/256. The options `--crc`, `--md5`, `--sha1`, `--sha2` (or `--sha256`),
`--keccak` and `--sha3` select a single algorithm; any other option prints
nothing. A wrong number of arguments prints the usage line and exits with
status 1; a file that cannot be opened exits with status 2.

From Python, `pmud.digest.compute_digests(stream, algorithm)` returns the
`(label, hex digest)` pairs for a binary stream.

## Helpers

```python
from pmud.text import replace_all
from pmud.netutil import hostname_to_ip, make_sockaddr

replace_all("a-b-c", "-", "--")      # "a--b--c"; an empty pattern raises ValueError
hostname_to_ip("127.0.0.1")          # numeric addresses are returned unchanged
make_sockaddr("10.0.0.1", 4000)      # ("10.0.0.1", 4000)
```

`hostname_to_ip` raises `HostResolutionError` for a name that cannot be
resolved; `make_sockaddr` raises `ValueError` for a bad address or port.

## Controllers

A controller sends its output to a connection: any object with a
`receive(message, *args)` method. Messages are members of
`pmud.user_client.Message`.

```python
from pmud.default_controller import DefaultController
from pmud.user_client import Message

class Printer:
    def receive(self, message, *args):
        print(message.name, *args)

controller = DefaultController(Printer())
controller.receive(Message.ON_USER_INPUT, "help")
```

`help` prints a framed help text, any other non-empty input prints
`Unknown command: ...`, and every input ends with the default `pmud` prompt.
Any other message raises `ValueError`.

## What this package does not do

There is no network server, no login or account creation, no per-connection
command dispatcher and no storage back end: the controllers only produce
messages for whatever connection object they are given.