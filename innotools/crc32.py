"""CRC-32 checksum calculation."""

from __future__ import annotations

from innotools.checksum import ChecksumBase

_POLYNOMIAL = 0xEDB88320
_NEGL = 0xFFFFFFFF


def _make_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        for _ in range(8):
            value = (value >> 1) ^ _POLYNOMIAL if value & 1 else value >> 1
        table.append(value)
    return tuple(table)


_TABLE = _make_table()


class Crc32(ChecksumBase):
    """Streaming CRC-32 checksum (reflected polynomial 0xEDB88320)."""

    def __init__(self) -> None:
        self._crc = _NEGL

    def reset(self) -> None:
        """Restart the checksum from its initial value."""
        self._crc = _NEGL

    def update(self, data: bytes) -> None:
        """Feed ``data`` into the checksum."""
        crc = self._crc
        table = _TABLE
        for byte in memoryview(data).cast("B"):
            crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
        self._crc = crc

    def finalize(self) -> int:
        """Return the checksum of all data fed so far."""
        return self._crc ^ _NEGL