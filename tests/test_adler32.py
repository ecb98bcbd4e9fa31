import zlib

import pytest

from innotools.adler32 import Adler32


def _checksum(data):
    checksum = Adler32()
    checksum.update(data)
    return checksum.finalize()


def test_empty_is_one():
    assert _checksum(b"") == 1


def test_known_value():
    assert _checksum(b"Wikipedia") == 0x11E60398


@pytest.mark.parametrize("length", [0, 1, 7, 8, 9, 15, 16, 255, 5552, 5553, 100_000])
def test_matches_zlib(length):
    data = bytes((i * 37 + 11) % 256 for i in range(length))
    assert _checksum(data) == zlib.adler32(data)


def test_all_ff_bytes_match_zlib():
    data = b"\xff" * 200_000
    assert _checksum(data) == zlib.adler32(data)


def test_incremental_equals_single_update():
    data = bytes(range(256)) * 50
    checksum = Adler32()
    for start in range(0, len(data), 333):
        checksum.update(data[start:start + 333])
    assert checksum.finalize() == _checksum(data)


def test_reset_restores_initial_state():
    checksum = Adler32()
    checksum.update(b"some data")
    checksum.reset()
    checksum.update(b"abc")
    assert checksum.finalize() == zlib.adler32(b"abc")