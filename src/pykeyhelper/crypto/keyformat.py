"""
Conversions between key encodings.

- raw: 32-byte scalar / Montgomery u-coordinate
- wire: 33-byte public key, `0x05` key type + raw
- DER: PKCS8 (private) / SPKI (public) containers, only used at the
  `cryptography` boundary
"""

from __future__ import annotations

from ..constants import (
    CURVE_TYPE,
    KEY_BUNDLE_TYPE,
    KEY_LEN,
    PRIVATE_KEY_DER_PREFIX,
    PUBLIC_KEY_DER_PREFIX,
    PUBLIC_KEY_WIRE_LEN,
)
from ..exceptions import InvalidKeyFormat


def _as_bytes(v: object, *, what: str) -> bytes:
    if isinstance(v, (bytes, bytearray, memoryview)):
        return bytes(v)
    raise InvalidKeyFormat(f"invalid {what} type: {type(v).__name__}")


def _expect_raw(raw32: object, *, what: str) -> bytes:
    b = _as_bytes(raw32, what=what)
    if len(b) != KEY_LEN:
        raise InvalidKeyFormat(f"expected {KEY_LEN}-byte {what}, got {len(b)}")
    return b


def to_wire_form(raw32: bytes) -> bytes:
    """Prefix a raw Curve25519 public key with the key type byte."""

    return KEY_BUNDLE_TYPE + _expect_raw(raw32, what="public key")


def to_raw_form(buf: bytes) -> bytes:
    """Strip the key type prefix if present. Idempotent on raw keys."""

    b = _as_bytes(buf, what="public key")
    if len(b) == PUBLIC_KEY_WIRE_LEN and b[0] == CURVE_TYPE:
        return b[1:]
    if len(b) == KEY_LEN:
        return b
    raise InvalidKeyFormat(f"invalid public key length: {len(b)}")


def to_pkcs8(raw32: bytes) -> bytes:
    return PRIVATE_KEY_DER_PREFIX + _expect_raw(raw32, what="private key")


def to_spki(raw32: bytes) -> bytes:
    return PUBLIC_KEY_DER_PREFIX + _expect_raw(raw32, what="public key")


def _strip_der(der: object, prefix: bytes, *, what: str) -> bytes:
    b = _as_bytes(der, what=what)
    if len(b) != len(prefix) + KEY_LEN or not b.startswith(prefix):
        raise InvalidKeyFormat(f"unexpected {what} DER encoding")
    return b[len(prefix) :]


def from_pkcs8(der: bytes) -> bytes:
    return _strip_der(der, PRIVATE_KEY_DER_PREFIX, what="PKCS8 private key")


def from_spki(der: bytes) -> bytes:
    return _strip_der(der, PUBLIC_KEY_DER_PREFIX, what="SPKI public key")
