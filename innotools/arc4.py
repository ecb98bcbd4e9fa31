"""Alleged RC4 stream cipher."""

from __future__ import annotations


class Arc4:
    """ARC4 keystream generator; encryption and decryption are the same operation."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if not key:
            raise ValueError("ARC4 key must not be empty")
        state = bytearray(range(256))
        j = 0
        for i in range(256):
            j = (j + state[i] + key[i % len(key)]) & 0xFF
            state[i], state[j] = state[j], state[i]
        self._state = state
        self._a = 0
        self._b = 0

    def _step(self) -> None:
        state = self._state
        self._a = (self._a + 1) & 0xFF
        self._b = (self._b + state[self._a]) & 0xFF
        state[self._a], state[self._b] = state[self._b], state[self._a]

    def discard(self, length: int) -> None:
        """Skip ``length`` bytes of keystream."""
        if length < 0:
            raise ValueError("length must not be negative")
        for _ in range(length):
            self._step()

    def crypt(self, data: bytes) -> bytes:
        """Return ``data`` XORed with the next bytes of keystream."""
        state = self._state
        out = bytearray()
        for byte in memoryview(data).cast("B"):
            self._step()
            out.append(state[(state[self._a] + state[self._b]) & 0xFF] ^ byte)
        return bytes(out)