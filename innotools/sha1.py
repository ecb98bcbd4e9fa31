"""SHA-1 hash function."""

from __future__ import annotations

from innotools.iteratedhash import IteratedHash

_MASK = 0xFFFFFFFF


def _rotl(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (32 - amount))) & _MASK


class Sha1(IteratedHash):
    """Streaming SHA-1 hash producing a 20-byte digest."""

    hash_size = 20
    byte_order = ">"

    @classmethod
    def initial_state(cls) -> list[int]:
        """Return the SHA-1 initialisation vector."""
        return [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0]

    def transform(self, block: bytes) -> None:
        """Compress one 64-byte block into the state."""
        schedule = list(self._words(block))
        for i in range(16, 80):
            schedule.append(
                _rotl(schedule[i - 3] ^ schedule[i - 8] ^ schedule[i - 14] ^ schedule[i - 16], 1)
            )
        a, b, c, d, e = self._state
        for i, word in enumerate(schedule):
            if i < 20:
                mixed, constant = d ^ (b & (c ^ d)), 0x5A827999
            elif i < 40:
                mixed, constant = b ^ c ^ d, 0x6ED9EBA1
            elif i < 60:
                mixed, constant = (b & c) | (d & (b | c)), 0x8F1BBCDC
            else:
                mixed, constant = b ^ c ^ d, 0xCA62C1D6
            temp = (_rotl(a, 5) + mixed + e + constant + word) & _MASK
            a, b, c, d, e = temp, a, _rotl(b, 30), c, d
        self._state = [
            (old + new) & _MASK for old, new in zip(self._state, (a, b, c, d, e))
        ]