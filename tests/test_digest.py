import sys
import os
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest

from siphasher.digest import ALGORITHMS, KeyedDigest, algorithm_class, keyed_hash, new
from siphasher.errors import InvalidKeyError, UnsupportedAlgorithmError
from siphasher.siphash import SipHasher13, SipHasher24, SipHasher24_128

KEY = bytes(range(16))


def test_registry_names():
    assert set(ALGORITHMS) == {"siphash13", "siphash24", "siphash13-128", "siphash24-128"}
    assert algorithm_class("SipHash24") is SipHasher24
    assert algorithm_class("siphash24-128") is SipHasher24_128


def test_new_by_name():
    hasher = new("siphash13", KEY)
    assert isinstance(hasher, SipHasher13)
    assert new().keys() == (0, 0)


def test_new_logs_selection(caplog):
    with caplog.at_level(logging.DEBUG, logger="siphasher.digest"):
        new("siphash24", KEY)
    assert "SipHasher24" in caplog.text
    assert KEY.hex() not in caplog.text


def test_keyed_hash_matches_reference_vector():
    result = keyed_hash(b"", key=KEY)
    assert result.hexdigest() == "310e0edd47db6f72"
    assert result.intdigest() == SipHasher24.hash(b"", KEY)
    assert result.digest() == bytes.fromhex("310e0edd47db6f72")


def test_keyed_hash_128():
    result = keyed_hash(b"", key=KEY, algo="siphash24-128")
    assert len(result.digest()) == 16
    assert result.hexdigest() == "a3817f04ba25a8e66df67214c7550293"
    assert result.intdigest() == SipHasher24_128.hash128(b"", KEY).as_int()


def test_keyed_hash_respects_key():
    payload = b"payload"
    digest_a = keyed_hash(payload, key=b"\x00" * 16).digest()
    digest_b = keyed_hash(payload, key=b"\x01" * 16).digest()
    assert digest_a != digest_b


def test_keyed_digest_is_frozen():
    result = KeyedDigest(b"\x01\x00")
    assert result.intdigest() == 1
    with pytest.raises(Exception):
        result._digest = b""  # type: ignore[misc]


def test_unknown_algorithm():
    with pytest.raises(UnsupportedAlgorithmError):
        keyed_hash(b"abc", key=b"0" * 16, algo="unknown")
    with pytest.raises(ValueError):
        new("md5")


def test_keyed_hash_validates_inputs():
    with pytest.raises(InvalidKeyError):
        keyed_hash(b"abc", key=b"0" * 15)
    with pytest.raises(TypeError):
        keyed_hash("abc", key=b"0" * 16)  # type: ignore[arg-type]
