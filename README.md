# innotools

Checksums, block hashes and a stream cipher as used by Inno Setup
installers, in pure Python with no dependencies outside the standard library.

Modules:

- `innotools.checksum` – `ChecksumType`, the `Checksum` value type and
  `ChecksumBase`, the shared base of the streaming checksums.
- `innotools.adler32` – `Adler32`.
- `innotools.crc32` – `Crc32` (reflected polynomial `0xEDB88320`).
- `innotools.iteratedhash` – `IteratedHash`, the common machinery of the
  block hashes.
- `innotools.md5`, `innotools.sha1`, `innotools.sha256` – `Md5`, `Sha1`
  and `Sha256`.
- `innotools.arc4` – `Arc4`, the alleged RC4 stream cipher.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Checksums

`Adler32` and `Crc32` are fed with `update` and give a 32-bit integer from
`finalize`; `reset` starts them over.

```python
from innotools.adler32 import Adler32
from innotools.crc32 import Crc32

crc = Crc32()
crc.update(b"some data")
crc.update(b" and more")
print(hex(crc.finalize()))

adler = Adler32()
adler.update(b"some data")
print(hex(adler.finalize()))
```

Every calculator derives from `ChecksumBase`, whose `load(stream, fmt)`
reads one value in `struct` format from a binary stream, feeds its raw
bytes into the checksum and returns the decoded value. A format without a
byte order prefix is read as little-endian; a short read raises `EOFError`.

```python
import io

crc = Crc32()
value = crc.load(io.BytesIO(b"\x01\x00\x00\x00"), "I")   # value == 1
```

## Checksum values

A `Checksum` pairs a `ChecksumType` with its value: a 32-bit integer for
Adler-32 and CRC-32, bytes of the digest length for MD5 (16), SHA-1 (20),
SHA-256 (32) and the 4-byte password check of
`PBKDF2_SHA256_XCHACHA20`, and `None` for `ChecksumType.NONE`. A value of
the wrong kind or length raises `ValueError`.

```python
from innotools.checksum import Checksum, ChecksumType

checksum = Checksum(ChecksumType.CRC32, crc.finalize())
print(checksum)      # "CRC32 0x..." – integers in hex, digests as hex bytes
```

Two checksums compare equal only when their types match and, for the
integer and digest types, their values match too. Checksums of type
`NONE` are always equal to each other; `PBKDF2_SHA256_XCHACHA20`
checksums never compare equal.

## Block hashes

`Md5`, `Sha1` and `Sha256` are fed with `update`; `finalize` returns the
digest as bytes and leaves the hash unchanged, so more data can follow.

```python
from innotools.sha256 import Sha256

digest_hash = Sha256()
digest_hash.update(b"file contents")
digest = digest_hash.finalize()      # 32 bytes
```

A hash can resume from a saved intermediate state.
`prepare_state(data, count)` returns the state after the first `count`
whole blocks (64 bytes each) of `data`, and `Md5(state, count)` (likewise
for the other two) continues from there as if those blocks had been fed.

```python
from innotools.sha1 import Sha1

prefix = bytes(64)
state = Sha1.prepare_state(prefix, 1)
resumed = Sha1(state, 1)
resumed.update(b"tail")
assert resumed.finalize() == (lambda h: (h.update(prefix + b"tail"), h.finalize())[1])(Sha1())
```

New block hashes can be made by subclassing `IteratedHash`, setting
`hash_size` and `byte_order` and implementing `initial_state` and
`transform`.

## ARC4

`Arc4(key)` is a symmetric stream cipher: `crypt` both encrypts and
decrypts. `discard(length)` skips keystream bytes, so a reader can move
forward without decrypting the data in between. An empty key raises
`ValueError`.

```python
from innotools.arc4 import Arc4

key = b"placeholder"
encrypted = Arc4(key).crypt(b"data")
assert Arc4(key).crypt(encrypted) == b"data"

cipher = Arc4(key)
cipher.discard(1000)
later = cipher.crypt(b"data")
```

## What this package does not do

It has no command-line tool and does not open or extract installers. It
does not parse executables, locate embedded setup data, derive keys from
passwords, or provide the XChaCha20 cipher; a `Checksum` of type
`PBKDF2_SHA256_XCHACHA20` can be held and printed, but nothing here
computes one. There is also no object that picks a hash algorithm from a
`ChecksumType` at run time: choose the class yourself and wrap its result
in a `Checksum`.