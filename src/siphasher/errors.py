"""Exceptions raised by :mod:`siphasher`.

Hashing itself never fails; these are raised only when input is rejected at the
API boundary. Each subclasses :class:`ValueError` so callers that catch the
builtin keep working.
"""

from __future__ import annotations


class SipHashError(Exception):
    """Base error for the package."""


class InvalidKeyError(SipHashError, ValueError):
    """Raised when a key is not exactly 16 bytes or a key word is not a u64."""


class InvalidStateError(SipHashError, ValueError):
    """Raised when a serialized hasher state is malformed or inconsistent."""


class UnsupportedAlgorithmError(SipHashError, ValueError):
    """Raised when an algorithm name is not registered."""


__all__ = [
    "SipHashError",
    "InvalidKeyError",
    "InvalidStateError",
    "UnsupportedAlgorithmError",
]
