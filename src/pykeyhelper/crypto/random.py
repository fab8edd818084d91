"""Secure randomness."""

from __future__ import annotations

import secrets

from ..exceptions import RandomnessUnavailable


def random_bytes(length: int) -> bytes:
    """Return `length` bytes from the OS CSPRNG, or raise `RandomnessUnavailable`."""

    if length < 0:
        raise ValueError("length must be non-negative")
    try:
        return secrets.token_bytes(length)
    except (OSError, NotImplementedError) as e:
        raise RandomnessUnavailable("secure random source failed") from e
