"""Adler-32 checksum calculation."""

from __future__ import annotations

from innotools.checksum import ChecksumBase

_BASE = 65521
# Largest number of bytes that can be summed before s2 may exceed 32 bits.
_NMAX = 5552


class Adler32(ChecksumBase):
    """Streaming Adler-32 checksum."""

    def __init__(self) -> None:
        self._state = 1

    def reset(self) -> None:
        """Restart the checksum from its initial value."""
        self._state = 1

    def update(self, data: bytes) -> None:
        """Feed ``data`` into the checksum."""
        view = memoryview(data).cast("B")
        s1 = self._state & 0xFFFF
        s2 = self._state >> 16
        for start in range(0, len(view), _NMAX):
            for byte in view[start:start + _NMAX]:
                s1 += byte
                s2 += s1
            s1 %= _BASE
            s2 %= _BASE
        self._state = (s2 << 16) | s1

    def finalize(self) -> int:
        """Return the checksum of all data fed so far."""
        return self._state