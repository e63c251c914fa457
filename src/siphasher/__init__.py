"""
SipHash-1-3 and SipHash-2-4, with 64-bit and 128-bit output, in pure Python.
"""

import logging

from .errors import (
    InvalidKeyError,
    InvalidStateError,
    SipHashError,
    UnsupportedAlgorithmError,
)
from .siphash import (
    Hash128,
    SipHasher,
    SipHasher13,
    SipHasher13_128,
    SipHasher24,
    SipHasher24_128,
    SipHasher128,
    siphash13,
    siphash24,
)
from .digest import ALGORITHMS, KeyedDigest, keyed_hash, new
from .serialization import deserialize_hasher, serialize_hasher, serialize_key
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALGORITHMS",
    "Hash128",
    "KeyedDigest",
    "SipHasher",
    "SipHasher13",
    "SipHasher13_128",
    "SipHasher24",
    "SipHasher24_128",
    "SipHasher128",
    "SipHashError",
    "InvalidKeyError",
    "InvalidStateError",
    "UnsupportedAlgorithmError",
    "deserialize_hasher",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
    "keyed_hash",
    "new",
    "serialize_hasher",
    "serialize_key",
    "siphash13",
    "siphash24",
]
