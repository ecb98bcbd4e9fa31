import hashlib

import pytest

from innotools.sha256 import Sha256


def _digest(data: bytes) -> bytes:
    hasher = Sha256()
    hasher.update(data)
    return hasher.finalize()


@pytest.mark.parametrize("length", [0, 1, 3, 55, 56, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_reference(length):
    data = bytes((i * 7 + 3) & 0xFF for i in range(length))
    assert _digest(data) == hashlib.sha256(data).digest()


def test_digest_size():
    assert len(_digest(b"data")) == 32
    assert Sha256.hash_size == 32


def test_chunked_updates_match_single_update():
    data = bytes(range(256)) * 5
    hasher = Sha256()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.finalize() == _digest(data)


def test_finalize_does_not_change_state():
    hasher = Sha256()
    hasher.update(b"first part ")
    first = hasher.finalize()
    assert hasher.finalize() == first
    hasher.update(b"second part")
    assert hasher.finalize() == hashlib.sha256(b"first part second part").digest()


def test_initial_state_words():
    state = Sha256.initial_state()
    assert len(state) == 8
    assert state[0] == 0x6A09E667
    assert state[7] == 0x5BE0CD19


def test_prepared_state_continues_hash():
    data = bytes(range(200))
    state = Sha256.prepare_state(data, 2)
    hasher = Sha256(state, 2)
    hasher.update(data[128:])
    assert hasher.finalize() == hashlib.sha256(data).digest()


def test_transform_changes_state():
    hasher = Sha256()
    before = list(hasher._state)
    hasher.transform(bytes(64))
    assert hasher._state != before
    assert all(0 <= word <= 0xFFFFFFFF for word in hasher._state)