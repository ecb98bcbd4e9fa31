import hashlib
import io

import pytest

from innotools.iteratedhash import IteratedHash
from innotools.md5 import Md5
from innotools.sha1 import Sha1

DATA = bytes(range(256)) * 3


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        IteratedHash()


@pytest.mark.parametrize("cls, reference", [(Md5, hashlib.md5), (Sha1, hashlib.sha1)])
def test_prepare_state_then_continue(cls, reference):
    prefix = DATA[:64]
    state = cls.prepare_state(prefix, 1)
    hasher = cls(state, 1)
    hasher.update(DATA[64:200])
    assert hasher.finalize() == reference(DATA[:200]).digest()


@pytest.mark.parametrize("cls", [Md5, Sha1])
def test_prepare_state_zero_blocks_is_initial(cls):
    assert list(cls.prepare_state(b"", 0)) == cls.initial_state()


@pytest.mark.parametrize("cls", [Md5, Sha1])
def test_prepare_state_needs_enough_data(cls):
    with pytest.raises(ValueError):
        cls.prepare_state(b"x" * 63, 1)


def test_prepare_state_uses_only_requested_blocks():
    assert Md5.prepare_state(DATA[:128], 1) == Md5.prepare_state(DATA[:64], 1)


def test_wrong_state_length_rejected():
    with pytest.raises(ValueError):
        Md5([0, 0, 0, 0, 0])


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Sha1(Sha1.initial_state(), -1)


def test_count_without_state_rejected():
    with pytest.raises(ValueError):
        Md5(count=2)


@pytest.mark.parametrize("cls, reference", [(Md5, hashlib.md5), (Sha1, hashlib.sha1)])
def test_chunked_updates_match_single_update(cls, reference):
    hasher = cls()
    for size in (1, 3, 60, 7, 64, 129, 0, 500):
        hasher.update(DATA[:size])
    expected = reference(b"".join(DATA[:s] for s in (1, 3, 60, 7, 64, 129, 0, 500)))
    assert hasher.finalize() == expected.digest()


def test_finalize_does_not_change_state():
    hasher = Sha1()
    hasher.update(b"first part")
    assert hasher.finalize() == hasher.finalize()
    hasher.update(b" second part")
    assert hasher.finalize() == hashlib.sha1(b"first part second part").digest()


def test_load_reads_and_hashes_value():
    hasher = Md5()
    stream = io.BytesIO(b"\x01\x02\x03\x04rest")
    assert hasher.load(stream, "I") == 0x04030201
    assert hasher.finalize() == hashlib.md5(b"\x01\x02\x03\x04").digest()


def test_load_short_stream_raises():
    with pytest.raises(EOFError):
        Sha1().load(io.BytesIO(b"\x01"), "I")


def test_accepts_bytearray_and_memoryview():
    hasher = Md5()
    hasher.update(bytearray(b"ab"))
    hasher.update(memoryview(b"c"))
    assert hasher.finalize() == hashlib.md5(b"abc").digest()