"""
Bit fixes applied to Curve25519 scalars.

`clamp_private_key` is the RFC 7748 clamp done by every X25519 scalar
multiplication. `unclamp_private_key` sets the bits a signing-style scalar
is expected to carry before it is reused for key agreement.
"""

from __future__ import annotations

from ..constants import KEY_LEN


def _mutable_scalar(sk32: bytes) -> bytearray:
    if len(sk32) != KEY_LEN:
        raise ValueError(f"expected {KEY_LEN}-byte private key")
    return bytearray(sk32)


def clamp_private_key(sk32: bytes) -> bytes:
    b = _mutable_scalar(sk32)
    b[0] &= 0xF8
    b[31] &= 0x7F
    b[31] |= 0x40
    return bytes(b)


def unclamp_private_key(sk32: bytes) -> bytes:
    b = _mutable_scalar(sk32)
    b[0] |= 0x06  # low bits -> 0b110 pattern
    b[31] |= 0x80
    b[31] &= 0xBF
    return bytes(b)
