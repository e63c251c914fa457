import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest

from siphasher.siphash import SipHasher13, SipHasher24
from siphasher.vectorized import hash_arrow_array, hash_pandas_series, hash_polars_series

KEY = bytes(range(16))
VALUES = [b"", b"a", bytes(range(9))]
EXPECTED = [SipHasher24.hash(val, KEY) for val in VALUES]


def test_hash_pandas_series():
    pd = pytest.importorskip("pandas")
    series = pd.Series(VALUES, index=[10, 11, 12])
    result = hash_pandas_series(series, key=KEY)
    assert str(result.dtype) == "uint64"
    assert list(result.index) == [10, 11, 12]
    assert [int(v) for v in result] == EXPECTED


def test_hash_arrow_array():
    pa = pytest.importorskip("pyarrow")
    result = hash_arrow_array(pa.array(VALUES, type=pa.binary()), key=KEY)
    assert result.type == pa.uint64()
    assert result.to_pylist() == EXPECTED

    coerced = hash_arrow_array(VALUES, key=KEY, algo="siphash13")
    assert coerced.to_pylist() == [SipHasher13.hash(val, KEY) for val in VALUES]


def test_hash_polars_series():
    pl = pytest.importorskip("polars")
    result = hash_polars_series(pl.Series("blobs", VALUES, dtype=pl.Binary), key=KEY)
    assert result.dtype == pl.UInt64
    assert result.name == "blobs"
    assert result.to_list() == EXPECTED


def test_rejects_128_bit_algorithms():
    pd = pytest.importorskip("pandas")
    with pytest.raises(ValueError):
        hash_pandas_series(pd.Series(VALUES), key=KEY, algo="siphash24-128")


def test_rejects_non_bytes_values():
    pd = pytest.importorskip("pandas")
    with pytest.raises(TypeError):
        hash_pandas_series(pd.Series(["text"]), key=KEY)
