from __future__ import annotations

import struct
from typing import NamedTuple, Optional, Tuple

from .errors import InvalidKeyError

_MASK_64 = 0xFFFFFFFFFFFFFFFF

# "somepseudorandomlygeneratedbytes"
_INIT_V0 = 0x736F6D6570736575
_INIT_V1 = 0x646F72616E646F6D
_INIT_V2 = 0x6C7967656E657261
_INIT_V3 = 0x7465646279746573

_FINAL_64 = 0xFF
_FINAL_128 = 0xEE
_SECOND_PASS_128 = 0xDD

State = Tuple[int, int, int, int]


def _rotl(x: int, b: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << b) | (x >> (64 - b))) & _MASK_64


def sip_round(v0: int, v1: int, v2: int, v3: int) -> State:
    """Apply one SipRound to the four state words and return the new words."""
    v0 = (v0 + v1) & _MASK_64
    v1 = _rotl(v1, 13)
    v1 ^= v0
    v0 = _rotl(v0, 32)

    v2 = (v2 + v3) & _MASK_64
    v3 = _rotl(v3, 16)
    v3 ^= v2

    v0 = (v0 + v3) & _MASK_64
    v3 = _rotl(v3, 21)
    v3 ^= v0

    v2 = (v2 + v1) & _MASK_64
    v1 = _rotl(v1, 17)
    v1 ^= v2
    v2 = _rotl(v2, 32)

    return v0, v1, v2, v3


def _rounds(state: State, count: int) -> State:
    v0, v1, v2, v3 = state
    for _ in range(count):
        v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
    return v0, v1, v2, v3


def _split_key(key) -> Tuple[int, int]:
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError("key must be bytes-like")
    key_bytes = bytes(key)
    if len(key_bytes) != 16:
        raise InvalidKeyError(
            f"SipHash key must be exactly 16 bytes, got {len(key_bytes)}"
        )
    return struct.unpack("<QQ", key_bytes)


def _check_key_word(word: int, label: str) -> int:
    if isinstance(word, bool) or not isinstance(word, int):
        raise TypeError(f"{label} must be an int")
    if not 0 <= word <= _MASK_64:
        raise InvalidKeyError(f"{label} must fit in an unsigned 64-bit word")
    return word


class Hash128(NamedTuple):
    """
    A 128-bit SipHash tag made of two 64-bit halves.

    ``h1`` is the low (least-significant) half and is produced first, so
    ``low, high = hasher.finish128()`` unpacks in that order.
    """

    h1: int
    h2: int

    def as_int(self) -> int:
        return (self.h2 << 64) | self.h1

    def as_bytes(self) -> bytes:
        """16 bytes: ``h1`` little-endian followed by ``h2`` little-endian."""
        return struct.pack("<QQ", self.h1, self.h2)

    def hexdigest(self) -> str:
        return self.as_bytes().hex()


class SipHasherBase:
    """
    Pure-Python SipHash-c-d with a streaming API.

    Subclasses fix the round counts. Input is accepted only as byte sequences;
    there are no integer or string writers, so the digest of a given byte
    stream is the same on every platform.

    The interface also mirrors hashlib-style objects (``update``, ``digest``,
    ``hexdigest``, ``copy``).
    """

    c_rounds = 2
    d_rounds = 4
    name = "siphash24"
    digest_size = 8
    block_size = 8
    # xored into v1 at key setup; non-zero only for the 128-bit variants
    _v1_tweak = 0

    def __init__(self, key: Optional[bytes] = None):
        if key is None:
            k0, k1 = 0, 0
        else:
            k0, k1 = _split_key(key)
        self._k0 = k0
        self._k1 = k1
        self.reset()

    # Construction -----------------------------------------------------
    @classmethod
    def new(cls):
        """Create a hasher keyed with sixteen zero bytes."""
        return cls()

    @classmethod
    def new_with_key(cls, key: bytes):
        """Create a hasher from a 16 byte key (two little-endian words)."""
        return cls(key)

    @classmethod
    def new_with_keys(cls, k0: int, k1: int):
        """Create a hasher from the two 64-bit key words."""
        hasher = cls.__new__(cls)
        hasher._k0 = _check_key_word(k0, "k0")
        hasher._k1 = _check_key_word(k1, "k1")
        hasher.reset()
        return hasher

    @classmethod
    def hash(cls, data: bytes, key: Optional[bytes] = None) -> int:
        """One-shot 64-bit hash of ``data``."""
        hasher = cls(key)
        hasher.write(data)
        return hasher.finish()

    def reset(self) -> None:
        """Discard all input, keeping the key."""
        self._v0 = self._k0 ^ _INIT_V0
        self._v1 = self._k1 ^ _INIT_V1 ^ self._v1_tweak
        self._v2 = self._k0 ^ _INIT_V2
        self._v3 = self._k1 ^ _INIT_V3
        self._tail = b""
        self._length = 0

    def keys(self) -> Tuple[int, int]:
        return self._k0, self._k1

    def key(self) -> bytes:
        return struct.pack("<QQ", self._k0, self._k1)

    def copy(self):
        dup = self.__class__.__new__(self.__class__)
        dup._k0 = self._k0
        dup._k1 = self._k1
        dup._v0 = self._v0
        dup._v1 = self._v1
        dup._v2 = self._v2
        dup._v3 = self._v3
        dup._tail = self._tail
        dup._length = self._length
        return dup

    __copy__ = copy

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(length={self._length})"

    # Input ------------------------------------------------------------
    def write(self, data: bytes) -> None:
        """Feed bytes; any chunking of the same stream gives the same hash."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")

        chunk = bytes(data)
        raw = self._tail + chunk
        self._length += len(chunk)

        offset_limit = len(raw) - (len(raw) % 8)
        for idx in range(0, offset_limit, 8):
            m = struct.unpack_from("<Q", raw, idx)[0]
            self._compress(m)

        self._tail = raw[offset_limit:]

    def update(self, data: bytes):
        self.write(data)
        return self

    # Output -----------------------------------------------------------
    def finish(self) -> int:
        """64-bit digest of everything written so far. Does not modify the hasher."""
        v0, v1, v2, v3 = self._final_state(_FINAL_64)
        return v0 ^ v1 ^ v2 ^ v3

    def digest(self) -> bytes:
        return struct.pack("<Q", self.finish())

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self.finish()

    # Internal helpers -------------------------------------------------
    def _compress(self, m: int) -> None:
        self._v3 ^= m
        self._v0, self._v1, self._v2, self._v3 = _rounds(
            (self._v0, self._v1, self._v2, self._v3), self.c_rounds
        )
        self._v0 ^= m

    def _final_state(self, marker: int) -> State:
        # Final block: leftover bytes + message length in the last byte.
        b = ((self._length & 0xFF) << 56) | int.from_bytes(self._tail, "little")

        v0, v1, v2, v3 = self._v0, self._v1, self._v2, self._v3
        v3 ^= b
        v0, v1, v2, v3 = _rounds((v0, v1, v2, v3), self.c_rounds)
        v0 ^= b

        v2 ^= marker
        return _rounds((v0, v1, v2, v3), self.d_rounds)

    def _snapshot(self):
        return (self._v0, self._v1, self._v2, self._v3), self._tail, self._length

    @classmethod
    def _restore(cls, k0: int, k1: int, state: State, tail: bytes, length: int):
        hasher = cls.new_with_keys(k0, k1)
        hasher._v0, hasher._v1, hasher._v2, hasher._v3 = state
        hasher._tail = bytes(tail)
        hasher._length = length
        return hasher


class SipHasher13(SipHasherBase):
    """SipHash-1-3: one compression round per word, three finalization rounds."""

    c_rounds = 1
    d_rounds = 3
    name = "siphash13"


class SipHasher24(SipHasherBase):
    """SipHash-2-4: two compression rounds per word, four finalization rounds."""

    c_rounds = 2
    d_rounds = 4
    name = "siphash24"


class SipHasher(SipHasher24):
    """
    The default SipHash, SipHash-2-4.

    SipHash is fast and keyed, which makes it a good choice for seeding hash
    tables from a random key. It is not intended for cryptographic purposes.
    """


class _SipHasher128Mixin:
    """
    Reference SipHash-128: ``0xee`` enters v1 at key setup and v2 at
    finalization, ``0xdd`` enters v1 before the second output pass.

    Only classes built on this mixin produce 128-bit tags.
    """

    _v1_tweak = 0xEE
    digest_size = 16

    @classmethod
    def hash128(cls, data: bytes, key: Optional[bytes] = None) -> Hash128:
        """One-shot 128-bit hash of ``data``."""
        hasher = cls(key)
        hasher.write(data)
        return hasher.finish128()

    def finish128(self) -> Hash128:
        """128-bit digest of everything written so far. Does not modify the hasher."""
        v0, v1, v2, v3 = self._final_state(_FINAL_128)
        h1 = v0 ^ v1 ^ v2 ^ v3

        v1 ^= _SECOND_PASS_128
        v0, v1, v2, v3 = _rounds((v0, v1, v2, v3), self.d_rounds)
        h2 = v0 ^ v1 ^ v2 ^ v3
        return Hash128(h1, h2)

    def digest128(self) -> bytes:
        return self.finish128().as_bytes()

    def hexdigest128(self) -> str:
        return self.digest128().hex()

    def digest(self) -> bytes:
        return self.digest128()

    def intdigest(self) -> int:
        return self.finish128().as_int()


class SipHasher13_128(_SipHasher128Mixin, SipHasher13):
    """SipHash-1-3 keyed for 128-bit output."""

    name = "siphash13-128"


class SipHasher24_128(_SipHasher128Mixin, SipHasher24):
    """SipHash-2-4 keyed for 128-bit output, compatible with the reference SipHash-128."""

    name = "siphash24-128"


class SipHasher128(SipHasher24_128):
    """The default 128-bit SipHash, SipHash-2-4-128."""


def siphash13(key: Optional[bytes] = None, data: Optional[bytes] = None) -> SipHasher13:
    """Convenience constructor matching hashlib-style usage."""
    hasher = SipHasher13(key)
    if data is not None:
        hasher.write(data)
    return hasher


def siphash24(key: Optional[bytes] = None, data: Optional[bytes] = None) -> SipHasher24:
    """Convenience constructor matching hashlib-style usage."""
    hasher = SipHasher24(key)
    if data is not None:
        hasher.write(data)
    return hasher


__all__ = [
    "Hash128",
    "SipHasherBase",
    "SipHasher13",
    "SipHasher24",
    "SipHasher",
    "SipHasher13_128",
    "SipHasher24_128",
    "SipHasher128",
    "sip_round",
    "siphash13",
    "siphash24",
]
