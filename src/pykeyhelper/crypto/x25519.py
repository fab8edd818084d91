"""
Pure-Python X25519 (RFC 7748), the software backend.

Montgomery ladder over projective (X : Z) coordinates with XOR-mask
conditional swaps. CPython gives no hardware constant-time guarantee, but the
ladder has no secret-dependent branches.
"""

from __future__ import annotations

from .clamp import clamp_private_key
from .field import P, int_to_le_bytes, inv, le_bytes_to_int

_A24 = 121665  # (486662 - 2) / 4
_MASK256 = (1 << 256) - 1

BASE_POINT = int_to_le_bytes(9)


def _cswap(a: int, b: int, swap: int) -> tuple[int, int]:
    mask = -(swap & 1) & _MASK256
    x = mask & (a ^ b)
    return a ^ x, b ^ x


def _decode_u(u32: bytes) -> int:
    # Bit 255 is ignored; non-canonical values reduce mod p in the ladder.
    return le_bytes_to_int(u32) & ((1 << 255) - 1)


def _ladder(k: int, u: int) -> int:
    x_2, z_2 = 1, 0
    x_3, z_3 = u, 1
    swap = 0
    for t in range(254, -1, -1):
        k_t = (k >> t) & 1
        swap ^= k_t
        x_2, x_3 = _cswap(x_2, x_3, swap)
        z_2, z_3 = _cswap(z_2, z_3, swap)
        swap = k_t

        a = (x_2 + z_2) % P
        aa = (a * a) % P
        b = (x_2 - z_2) % P
        bb = (b * b) % P
        e = (aa - bb) % P
        c = (x_3 + z_3) % P
        d = (x_3 - z_3) % P
        da = (d * a) % P
        cb = (c * b) % P

        x_3 = pow(da + cb, 2, P)
        z_3 = (u * pow(da - cb, 2, P)) % P
        x_2 = (aa * bb) % P
        z_2 = (e * (aa + _A24 * e)) % P

    x_2, x_3 = _cswap(x_2, x_3, swap)
    z_2, z_3 = _cswap(z_2, z_3, swap)
    return (x_2 * inv(z_2)) % P


def x25519(k32: bytes, u32: bytes) -> bytes:
    """Return the 32-byte u-coordinate of clamp(k) * u. May be all zero for low-order u."""

    if len(k32) != 32 or len(u32) != 32:
        raise ValueError("X25519 inputs must be 32 bytes")
    k = le_bytes_to_int(clamp_private_key(k32))
    return int_to_le_bytes(_ladder(k, _decode_u(u32)))


def x25519_base(k32: bytes) -> bytes:
    return x25519(k32, BASE_POINT)
