from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Type

from .errors import UnsupportedAlgorithmError
from .siphash import (
    SipHasher13,
    SipHasher13_128,
    SipHasher24,
    SipHasher24_128,
    SipHasherBase,
)

logger = logging.getLogger(__name__)

ALGORITHMS: Dict[str, Type[SipHasherBase]] = {
    cls.name: cls
    for cls in (SipHasher13, SipHasher24, SipHasher13_128, SipHasher24_128)
}


def algorithm_class(algo: str) -> Type[SipHasherBase]:
    algo_normalized = algo.lower()
    try:
        return ALGORITHMS[algo_normalized]
    except KeyError:
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algo}") from None


def new(algo: str = "siphash24", key: Optional[bytes] = None) -> SipHasherBase:
    """
    Construct a hasher by algorithm name.

    Args:
        algo: One of ``siphash13``, ``siphash24``, ``siphash13-128`` or
            ``siphash24-128`` (case-insensitive)
        key: 16-byte key, or None for the all-zero key

    Raises:
        UnsupportedAlgorithmError: If algo is not registered
    """
    cls = algorithm_class(algo)
    logger.debug("selected %s for algorithm %r", cls.__name__, algo)
    return cls(key)


@dataclass(frozen=True)
class KeyedDigest:
    _digest: bytes

    def digest(self) -> bytes:
        return self._digest

    def hexdigest(self) -> str:
        return self._digest.hex()

    def intdigest(self) -> int:
        return int.from_bytes(self._digest, byteorder="little", signed=False)


def keyed_hash(data: bytes, key: bytes, algo: str = "siphash24") -> KeyedDigest:
    """
    Hash a byte string in one shot.

    Args:
        data: Bytes-like input
        key: 16-byte key
        algo: Hash algorithm to use (default: "siphash24")

    Returns:
        KeyedDigest object with digest(), hexdigest(), and intdigest() methods.
        128-bit algorithms produce 16-byte digests, low half first.

    Raises:
        UnsupportedAlgorithmError: If algo is unsupported
        InvalidKeyError: If key is not 16 bytes
        TypeError: If data or key is not bytes-like
    """
    hasher = new(algo, key)
    hasher.write(data)
    return KeyedDigest(hasher.digest())


__all__ = ["ALGORITHMS", "KeyedDigest", "algorithm_class", "keyed_hash", "new"]
