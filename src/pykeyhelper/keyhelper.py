"""Account key material: identity key, registration id, signed and one-time prekeys."""

from __future__ import annotations

from .constants import KEY_LEN, PUBLIC_KEY_WIRE_LEN, REGISTRATION_ID_MASK
from .crypto.curve import Curve25519Provider, DefaultCurve25519Provider
from .crypto.random import random_bytes
from .curve import calculate_signature, generate_keypair
from .exceptions import InvalidArgument
from .keys import KeyPair, PreKey, SignedPreKey


def _is_non_negative_integer(n: object) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n >= 0


def _is_key_bytes(v: object, length: int) -> bool:
    return isinstance(v, (bytes, bytearray, memoryview)) and len(v) == length


def generate_identity_key_pair(*, curve: Curve25519Provider | None = None) -> KeyPair:
    """Generate the account's long-term identity key pair."""

    return generate_keypair(curve=curve)


def generate_registration_id() -> int:
    # Uint16 (little-endian) & 0x3fff
    return int.from_bytes(random_bytes(2), "little") & REGISTRATION_ID_MASK


def generate_signed_pre_key(
    identity_key_pair: KeyPair,
    signed_key_id: int,
    *,
    curve: Curve25519Provider | None = None,
) -> SignedPreKey:
    """
    Generate a prekey and sign its 33-byte public key with the identity key.
    """

    if not (
        _is_key_bytes(getattr(identity_key_pair, "private", None), KEY_LEN)
        and _is_key_bytes(getattr(identity_key_pair, "public", None), PUBLIC_KEY_WIRE_LEN)
    ):
        raise InvalidArgument("Invalid argument for identity_key_pair")
    if not _is_non_negative_integer(signed_key_id):
        raise InvalidArgument(f"Invalid argument for signed_key_id: {signed_key_id!r}")

    curve = curve or DefaultCurve25519Provider()
    key_pair = curve.generate_keypair()
    signature = calculate_signature(identity_key_pair.private, key_pair.public, curve=curve)
    return SignedPreKey(key_id=signed_key_id, key_pair=key_pair, signature=signature)


def generate_pre_key(key_id: int, *, curve: Curve25519Provider | None = None) -> PreKey:
    if not _is_non_negative_integer(key_id):
        raise InvalidArgument(f"Invalid argument for key_id: {key_id!r}")
    return PreKey(key_id=key_id, key_pair=generate_keypair(curve=curve))


def generate_pre_keys(
    start_id: int, count: int, *, curve: Curve25519Provider | None = None
) -> list[PreKey]:
    """
    Generate `count` one-time prekeys with consecutive ids starting at `start_id`.

    Ids are independent; callers may just as well split a batch across threads.
    """

    if not _is_non_negative_integer(start_id):
        raise InvalidArgument(f"Invalid argument for start_id: {start_id!r}")
    if not _is_non_negative_integer(count):
        raise InvalidArgument(f"Invalid argument for count: {count!r}")

    curve = curve or DefaultCurve25519Provider()
    return [generate_pre_key(start_id + i, curve=curve) for i in range(count)]
