"""Block-based hash functions built from a compression function."""

from __future__ import annotations

import struct
from abc import abstractmethod
from collections.abc import Sequence

from innotools.checksum import ChecksumBase

_WORD_MASK = 0xFFFFFFFF
_COUNT_MASK = 0xFFFFFFFFFFFFFFFF


class IteratedHash(ChecksumBase):
    """Merkle-Damgard hash with 32-bit words and a 64-bit message bit length.

    Subclasses set :attr:`hash_size`, :attr:`byte_order` and implement
    :meth:`initial_state` and :meth:`transform`.
    """

    #: Size of one input block in bytes.
    block_size: int = 64
    #: Size of the digest in bytes.
    hash_size: int = 0
    #: ``struct`` byte order prefix for words and the length field.
    byte_order: str = "<"

    def __init__(self, state: Sequence[int] | None = None, count: int = 0) -> None:
        """Start a hash, optionally from ``state`` after ``count`` whole blocks."""
        if count < 0:
            raise ValueError("block count must not be negative")
        words = self.hash_size // 4
        if state is None:
            if count:
                raise ValueError("a block count needs an explicit state")
            state = self.initial_state()
        if len(state) != words:
            raise ValueError(f"state must hold {words} words, got {len(state)}")
        self._state = [word & _WORD_MASK for word in state]
        self._count = (count * self.block_size) & _COUNT_MASK
        self._buffer = bytearray()

    @classmethod
    @abstractmethod
    def initial_state(cls) -> list[int]:
        """Return the state words a fresh hash starts with."""

    @abstractmethod
    def transform(self, block: bytes) -> None:
        """Compress one block of :attr:`block_size` bytes into the state."""

    def _words(self, block: bytes) -> tuple[int, ...]:
        return struct.unpack(f"{self.byte_order}{self.block_size // 4}I", block)

    def update(self, data: bytes) -> None:
        """Feed ``data`` into the hash."""
        view = memoryview(data).cast("B")
        block_size = self.block_size
        self._count = (self._count + len(view)) & _COUNT_MASK
        if self._buffer:
            needed = block_size - len(self._buffer)
            self._buffer += view[:needed]
            view = view[needed:]
            if len(self._buffer) < block_size:
                return
            self.transform(bytes(self._buffer))
            self._buffer.clear()
        whole = len(view) - len(view) % block_size
        for start in range(0, whole, block_size):
            self.transform(view[start:start + block_size])
        self._buffer += view[whole:]

    def finalize(self) -> bytes:
        """Return the digest of all data fed so far, leaving the hash unchanged."""
        block_size = self.block_size
        length_field = struct.pack(f"{self.byte_order}Q", (self._count * 8) & _COUNT_MASK)
        tail = bytes(self._buffer) + b"\x80"
        pad = (block_size - len(length_field) - len(tail)) % block_size
        tail += bytes(pad) + length_field

        saved = self._state
        self._state = list(saved)
        try:
            for start in range(0, len(tail), block_size):
                self.transform(tail[start:start + block_size])
            return struct.pack(f"{self.byte_order}{len(self._state)}I", *self._state)
        finally:
            self._state = saved

    @classmethod
    def prepare_state(cls, data: bytes, count: int) -> tuple[int, ...]:
        """Return the state after hashing the first ``count`` blocks of ``data``."""
        if count < 0:
            raise ValueError("block count must not be negative")
        length = count * cls.block_size
        if len(data) < length:
            raise ValueError(f"need {length} bytes of data, got {len(data)}")
        hasher = cls()
        hasher.update(bytes(data[:length]))
        return tuple(hasher._state)