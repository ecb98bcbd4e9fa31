"""Checksum values and shared helpers for streaming checksum calculators."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO


class ChecksumType(Enum):
    """Kinds of checksums stored in setup files."""

    NONE = "None"
    ADLER32 = "Adler32"
    CRC32 = "CRC32"
    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    PBKDF2_SHA256_XCHACHA20 = "PBKDF2-SHA256+XChaCha20"

    def __str__(self) -> str:
        return self.value


_INTEGER_TYPES = {ChecksumType.ADLER32, ChecksumType.CRC32}

_DIGEST_SIZES = {
    ChecksumType.MD5: 16,
    ChecksumType.SHA1: 20,
    ChecksumType.SHA256: 32,
    ChecksumType.PBKDF2_SHA256_XCHACHA20: 4,
}


@dataclass(frozen=True, eq=False)
class Checksum:
    """A checksum of a given type.

    ``value`` is a 32-bit integer for Adler-32 and CRC-32, bytes of the
    digest size for the hash types and ``None`` for :attr:`ChecksumType.NONE`.
    """

    type: ChecksumType
    value: int | bytes | None = None

    def __post_init__(self) -> None:
        if self.type is ChecksumType.NONE:
            if self.value is not None:
                raise ValueError("a checksum of type None holds no value")
        elif self.type in _INTEGER_TYPES:
            if not isinstance(self.value, int) or not 0 <= self.value <= 0xFFFFFFFF:
                raise ValueError(f"{self.type} checksum must be a 32-bit unsigned integer")
        else:
            if not isinstance(self.value, (bytes, bytearray, memoryview)):
                raise ValueError(f"{self.type} checksum must be bytes")
            digest = bytes(self.value)
            if len(digest) != _DIGEST_SIZES[self.type]:
                raise ValueError(
                    f"{self.type} checksum must be {_DIGEST_SIZES[self.type]} bytes long"
                )
            object.__setattr__(self, "value", digest)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Checksum):
            return NotImplemented
        if other.type is not self.type:
            return False
        if self.type is ChecksumType.NONE:
            return True
        if self.type is ChecksumType.PBKDF2_SHA256_XCHACHA20:
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __str__(self) -> str:
        if self.type is ChecksumType.NONE:
            body = "(no checksum)"
        elif self.type in _INTEGER_TYPES:
            body = f"0x{self.value:>8x}"
        else:
            body = bytes(self.value).hex()
        return f"{self.type} {body}"


class ChecksumBase(ABC):
    """Base for checksum calculators that can consume values read from a stream."""

    @abstractmethod
    def update(self, data: bytes) -> None:
        """Feed ``data`` into the checksum."""

    def load(self, stream: BinaryIO, fmt: str):
        """Read one value in ``struct`` format ``fmt``, checksum its raw bytes and return it.

        A format without a byte order prefix is read as little-endian.
        """
        if not fmt or fmt[0] not in "@=<>!":
            fmt = "<" + fmt
        size = struct.calcsize(fmt)
        raw = stream.read(size)
        if len(raw) != size:
            raise EOFError(f"expected {size} bytes, got {len(raw)}")
        self.update(raw)
        return struct.unpack(fmt, raw)[0]