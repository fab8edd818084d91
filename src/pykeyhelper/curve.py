"""
Curve25519 key pairs, agreement and signatures with libsignal key encodings.

Public keys are accepted as 33-byte `0x05`-prefixed keys or bare 32-byte
points, and always returned in the 33-byte form. Private keys are raw 32-byte
scalars.
"""

from __future__ import annotations

import logging
from enum import Enum

from .constants import KEY_LEN, SIGNATURE_LEN
from .crypto.clamp import unclamp_private_key
from .crypto.curve import Curve25519Provider, DefaultCurve25519Provider
from .crypto.keyformat import to_raw_form, to_wire_form
from .exceptions import (
    InvalidArgument,
    InvalidKeyFormat,
    InvalidMessage,
    InvalidPrivateKey,
    InvalidPublicKey,
    InvalidSignature,
)
from .keys import KeyPair

logger = logging.getLogger(__name__)


class VerifyMode(Enum):
    """
    Trust assumption of a `verify_signature` call.

    `TRUST_ON_FIRST_USE` skips the cryptographic check and only validates the
    input shapes. Use it only for keys this account already trusts; a remote
    party's signed prekey must be checked with `FULL`.
    """

    FULL = "full"
    TRUST_ON_FIRST_USE = "trust_on_first_use"


def _validate_private_key(private_key: object) -> bytes:
    if private_key is None:
        raise InvalidPrivateKey("undefined private key")
    if not isinstance(private_key, (bytes, bytearray, memoryview)):
        raise InvalidPrivateKey(f"invalid private key type: {type(private_key).__name__}")
    if len(private_key) != KEY_LEN:
        raise InvalidPrivateKey(f"incorrect private key length: {len(private_key)}")
    return bytes(private_key)


def _scrub_public_key(public_key: object) -> bytes:
    try:
        raw = to_raw_form(public_key)  # type: ignore[arg-type]
    except InvalidKeyFormat as e:
        raise InvalidPublicKey(f"invalid public key: {e}") from e
    if len(public_key) == KEY_LEN:  # type: ignore[arg-type]
        logger.warning("expected 33-byte public key, got bare 32-byte form")
    return raw


def _validate_message(message: object) -> bytes:
    if not isinstance(message, (bytes, bytearray, memoryview)) or len(message) == 0:
        raise InvalidMessage("invalid message")
    return bytes(message)


def generate_keypair(*, curve: Curve25519Provider | None = None) -> KeyPair:
    curve = curve or DefaultCurve25519Provider()
    return curve.generate_keypair()


def derive_public_from_private(
    private_key: bytes, *, curve: Curve25519Provider | None = None
) -> bytes:
    """
    Return the 33-byte agreement public key for a signing-style private scalar.

    The scalar is unclamped first so one stored private key can serve both
    as a signing key and as an X25519 key.
    """

    curve = curve or DefaultCurve25519Provider()
    priv = _validate_private_key(private_key)
    return to_wire_form(curve.public_from_private(unclamp_private_key(priv)))


def calculate_agreement(
    public_key: bytes, private_key: bytes, *, curve: Curve25519Provider | None = None
) -> bytes:
    """
    X25519 shared secret between a peer's public key and our private key (32 bytes).

    The output is bit-identical on the native and software backends.
    """

    curve = curve or DefaultCurve25519Provider()
    priv = _validate_private_key(private_key)
    pub = _scrub_public_key(public_key)
    return curve.shared_key(priv, pub)


def calculate_signature(
    private_key: bytes, message: bytes, *, curve: Curve25519Provider | None = None
) -> bytes:
    curve = curve or DefaultCurve25519Provider()
    priv = _validate_private_key(private_key)
    return curve.sign(priv, _validate_message(message))


def verify_signature(
    public_key: bytes,
    message: bytes,
    signature: bytes,
    mode: VerifyMode,
    *,
    curve: Curve25519Provider | None = None,
) -> bool:
    """
    Verify `signature` over `message` with `public_key`.

    Raises on structurally invalid input in both modes. Under `VerifyMode.FULL`
    a well-formed but wrong signature returns False.
    """

    if not isinstance(mode, VerifyMode):
        raise InvalidArgument(f"mode must be a VerifyMode, got {type(mode).__name__}")
    pub = _scrub_public_key(public_key)
    msg = _validate_message(message)
    if not isinstance(signature, (bytes, bytearray, memoryview)) or len(signature) != SIGNATURE_LEN:
        raise InvalidSignature("invalid signature")
    if mode is VerifyMode.TRUST_ON_FIRST_USE:
        return True

    curve = curve or DefaultCurve25519Provider()
    return curve.verify(pub, msg, bytes(signature))
