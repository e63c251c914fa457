"""Serialization helpers.

A serialized hasher carries its key words. Treat the output as secret when the
key is.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Mapping

from .digest import algorithm_class
from .errors import InvalidStateError, UnsupportedAlgorithmError
from .siphash import SipHasherBase

logger = logging.getLogger(__name__)

_MAX_U64 = 0xFFFFFFFFFFFFFFFF


def _b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def _b64d(s: str) -> bytes:
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise InvalidStateError(f"tail is not valid base64: {s!r}") from exc


def _word(blob: Mapping[str, Any], field: str) -> int:
    try:
        value = blob[field]
    except KeyError:
        raise InvalidStateError(f"missing field {field!r}") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidStateError(f"{field} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= _MAX_U64:
        raise InvalidStateError(f"{field} must fit in an unsigned 64-bit word")
    return value


def serialize_key(hasher: SipHasherBase) -> dict[str, int]:
    k0, k1 = hasher.keys()
    return {"k0": k0, "k1": k1}


def serialize_hasher(hasher: SipHasherBase) -> dict[str, Any]:
    """Serialize a hasher, including unconsumed input, to a JSON-safe dict."""

    (v0, v1, v2, v3), tail, length = hasher._snapshot()
    blob: dict[str, Any] = {"algorithm": hasher.name}
    blob.update(serialize_key(hasher))
    blob.update(
        {
            "length": length,
            "state": {"v0": v0, "v1": v1, "v2": v2, "v3": v3},
            "tail": _b64e(tail),
        }
    )
    return blob


def deserialize_hasher(blob: Mapping[str, Any]) -> SipHasherBase:
    """Deserialize a hasher produced by :func:`serialize_hasher`.

    Writing to the result continues the stream exactly where the serialized
    hasher left off.
    """

    try:
        algo = blob["algorithm"]
        state_blob = blob["state"]
        tail_text = blob["tail"]
    except KeyError as exc:
        raise InvalidStateError(f"missing field {exc.args[0]!r}") from None
    if not isinstance(state_blob, Mapping):
        raise InvalidStateError("state must be a mapping of v0..v3")

    if not isinstance(algo, str):
        raise InvalidStateError(f"algorithm must be a string, got {type(algo).__name__}")
    try:
        cls = algorithm_class(algo)
    except UnsupportedAlgorithmError as exc:
        raise InvalidStateError(str(exc)) from exc
    k0 = _word(blob, "k0")
    k1 = _word(blob, "k1")
    state = tuple(_word(state_blob, f"v{i}") for i in range(4))

    length = blob.get("length")
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise InvalidStateError("length must be a non-negative integer")

    tail = _b64d(str(tail_text))
    if len(tail) > 7:
        raise InvalidStateError(f"tail holds {len(tail)} bytes, at most 7 allowed")
    if len(tail) != length % 8:
        raise InvalidStateError(
            f"tail of {len(tail)} bytes is inconsistent with length {length}"
        )

    logger.debug("restoring %s at length %d", cls.__name__, length)
    return cls._restore(k0, k1, state, tail, length)


__all__ = ["serialize_key", "serialize_hasher", "deserialize_hasher"]
