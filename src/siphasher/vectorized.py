from __future__ import annotations

import logging
from typing import Any, Iterable, List

from .digest import algorithm_class, keyed_hash

logger = logging.getLogger(__name__)


def _hash_values(values: Iterable[Any], key: bytes, algo: str) -> List[int]:
    if algorithm_class(algo).digest_size != 8:
        raise ValueError(f"{algo} produces 128-bit digests; columns hold uint64 only")
    hashes = [keyed_hash(val, key=key, algo=algo).intdigest() for val in values]
    logger.debug("hashed %d values with %s", len(hashes), algo)
    return hashes


def hash_pandas_series(series: Any, key: bytes, algo: str = "siphash24"):
    """
    Hash a pandas Series of bytes values into a uint64 Series.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = _hash_values(series, key, algo)
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="uint64")


def hash_arrow_array(array: Any, key: bytes, algo: str = "siphash24"):
    """
    Hash a pyarrow binary Array (or values coercible to one) into a uint64 Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array, type=pa.binary())
    values = [val.as_py() if hasattr(val, "as_py") else val for val in arr]
    return pa.array(_hash_values(values, key, algo), type=pa.uint64())


def hash_polars_series(series: Any, key: bytes, algo: str = "siphash24"):
    """
    Hash a polars Binary Series into a UInt64 Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series, dtype=pl.Binary)
    hashes = _hash_values(ser.to_list(), key, algo)
    name = getattr(ser, "name", None) or "hash"
    return pl.Series(name=name, values=hashes, dtype=pl.UInt64)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
