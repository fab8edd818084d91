"""Arithmetic in GF(2^255 - 19), shared by the X25519 ladder and the Edwards signature code."""

from __future__ import annotations

P = 2**255 - 19

# sqrt(-1) mod p
SQRT_M1 = pow(2, (P - 1) // 4, P)


def le_bytes_to_int(b: bytes) -> int:
    return int.from_bytes(b, "little", signed=False)


def int_to_le_bytes(x: int, length: int = 32) -> bytes:
    return int(x).to_bytes(length, "little", signed=False)


def modp(x: int) -> int:
    return x % P


def inv(x: int) -> int:
    # Fermat inversion; inv(0) == 0.
    return pow(x, P - 2, P)


def sqrt_mod_p(a: int) -> int:
    """
    Return x such that x^2 = a mod p, or raise ValueError if none exists.

    p = 5 (mod 8), so one exponentiation plus a correction by sqrt(-1).
    """

    a = a % P
    x = pow(a, (P + 3) // 8, P)
    if (x * x - a) % P != 0:
        x = (x * SQRT_M1) % P
    if (x * x - a) % P != 0:
        raise ValueError("no square root")
    return x
