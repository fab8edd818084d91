"""
Signal-style Curve25519 signatures (XEdDSA as implemented by `curve25519-js`).

- Sign with an X25519 private scalar; no separate Ed25519 key is stored.
- Verify against the Montgomery u-coordinate, converted to an Edwards y.
- The Edwards public key's sign bit travels in the MSB of the signature.

Signing is deterministic: the nonce is H(a || m), as in libsignal-node.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass

from .clamp import clamp_private_key
from .field import P, int_to_le_bytes, inv, le_bytes_to_int, modp, sqrt_mod_p

# Group order.
L = 2**252 + 27742317777372353535851937790883648493

# d = -121665/121666 mod p
D = -121665 * inv(121666) % P


@dataclass(frozen=True, slots=True)
class _ExtPoint:
    # Extended coordinates (X:Y:Z:T), x=X/Z, y=Y/Z, T=XY/Z
    X: int
    Y: int
    Z: int
    T: int


_IDENTITY = _ExtPoint(X=0, Y=1, Z=1, T=0)

_B_Y = 46316835694926478169428394003475163141307993866256225615783033603165251855960
_B_X = 15112221349535400772501151409588531511454012693041857206046113283949847762202
_B = _ExtPoint(X=_B_X, Y=_B_Y, Z=1, T=modp(_B_X * _B_Y))


def _sha512_int(*parts: bytes) -> int:
    return le_bytes_to_int(hashlib.sha512(b"".join(parts)).digest())


def _add(p: _ExtPoint, q: _ExtPoint) -> _ExtPoint:
    a = modp((p.Y - p.X) * (q.Y - q.X))
    b = modp((p.Y + p.X) * (q.Y + q.X))
    c = modp(2 * D * p.T * q.T)
    d = modp(2 * p.Z * q.Z)
    e, f, g, h = b - a, d - c, d + c, b + a
    return _ExtPoint(X=modp(e * f), Y=modp(g * h), Z=modp(f * g), T=modp(e * h))


def _double(p: _ExtPoint) -> _ExtPoint:
    a = modp(p.X * p.X)
    b = modp(p.Y * p.Y)
    c = modp(2 * p.Z * p.Z)
    e = modp((p.X + p.Y) * (p.X + p.Y) - a - b)
    g = modp(b - a)
    f = modp(g - c)
    h = modp(-a - b)
    return _ExtPoint(X=modp(e * f), Y=modp(g * h), Z=modp(f * g), T=modp(e * h))


def _mul(p: _ExtPoint, s: int) -> _ExtPoint:
    # Double-and-add; used with secret scalars only in pure-Python mode.
    r = _IDENTITY
    while s:
        if s & 1:
            r = _add(r, p)
        p = _double(p)
        s >>= 1
    return r


def _encode(p: _ExtPoint) -> bytes:
    zinv = inv(p.Z)
    x = modp(p.X * zinv)
    out = bytearray(int_to_le_bytes(modp(p.Y * zinv)))
    out[31] |= (x & 1) << 7
    return bytes(out)


def _decode(enc: bytes) -> _ExtPoint:
    sign = enc[31] >> 7
    y = le_bytes_to_int(enc) & ((1 << 255) - 1)
    if y >= P:
        raise ValueError("non-canonical y coordinate")
    y2 = modp(y * y)
    x = sqrt_mod_p((y2 - 1) * inv(D * y2 + 1))
    if (x & 1) != sign:
        x = P - x
    return _ExtPoint(X=x, Y=y, Z=1, T=modp(x * y))


def montgomery_to_edwards_y(u32: bytes) -> bytes:
    """Birational map u -> y = (u - 1) / (u + 1); the returned encoding has the sign bit clear."""

    u = le_bytes_to_int(u32) & ((1 << 255) - 1)
    return int_to_le_bytes(modp((u - 1) * inv(u + 1)))


def curve25519_sign(private_key: bytes, message: bytes) -> bytes:
    """Return a 64-byte signature compatible with `curve25519-js`/libsignal."""

    sk = clamp_private_key(private_key)
    a = le_bytes_to_int(sk)

    a_enc = _encode(_mul(_B, a))
    sign_bit = a_enc[31] & 0x80

    r = _sha512_int(sk, message) % L
    r_enc = _encode(_mul(_B, r))

    h = _sha512_int(r_enc, a_enc, message) % L
    s = (r + h * a) % L

    sig = bytearray(r_enc + int_to_le_bytes(s))
    sig[63] |= sign_bit
    return bytes(sig)


def curve25519_verify(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """
    Check a signature made by `curve25519_sign`.

    `public_key` is the raw 32-byte u-coordinate and `signature` is 64 bytes;
    structurally invalid input is the caller's responsibility. Any
    cryptographic mismatch yields False.
    """

    sig = bytearray(signature)
    sign_bit = sig[63] & 0x80
    sig[63] &= 0x7F

    r_enc = bytes(sig[:32])
    s = le_bytes_to_int(bytes(sig[32:]))
    if s >= L:
        return False

    edpk = bytearray(montgomery_to_edwards_y(public_key))
    edpk[31] |= sign_bit
    a_enc = bytes(edpk)

    try:
        a_point = _decode(a_enc)
        r_point = _decode(r_enc)
    except ValueError:
        return False

    h = _sha512_int(r_enc, a_enc, message) % L
    lhs = _encode(_mul(_B, s))
    rhs = _encode(_add(r_point, _mul(a_point, h)))
    return hmac.compare_digest(lhs, rhs)
