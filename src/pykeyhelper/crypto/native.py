"""X25519 via `cryptography` (OpenSSL), exchanging keys as DER."""

from __future__ import annotations

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from ..exceptions import InvalidKeyFormat, InvalidPublicKey, NativeCryptoUnavailable
from ..keys import KeyPair
from .curve25519_signature import curve25519_sign, curve25519_verify
from .keyformat import from_pkcs8, from_spki, to_pkcs8, to_spki, to_wire_form


def _load_private(private_key: bytes) -> X25519PrivateKey:
    try:
        key = serialization.load_der_private_key(to_pkcs8(private_key), password=None)
    except UnsupportedAlgorithm as e:
        raise NativeCryptoUnavailable("X25519 not supported by the OpenSSL build") from e
    if not isinstance(key, X25519PrivateKey):
        raise NativeCryptoUnavailable(f"PKCS8 import produced {type(key).__name__}")
    return key


def _load_public(public_key: bytes) -> X25519PublicKey:
    try:
        key = serialization.load_der_public_key(to_spki(public_key))
    except UnsupportedAlgorithm as e:
        raise NativeCryptoUnavailable("X25519 not supported by the OpenSSL build") from e
    if not isinstance(key, X25519PublicKey):
        raise NativeCryptoUnavailable(f"SPKI import produced {type(key).__name__}")
    return key


def _export_public(key: X25519PublicKey) -> bytes:
    der = key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    try:
        return from_spki(der)
    except InvalidKeyFormat as e:
        raise NativeCryptoUnavailable("unexpected SPKI layout from backend") from e


class NativeCurve25519Provider:
    """
    Raw-key operations on top of `cryptography`.

    Inputs are validated 32-byte raw keys. Raises `NativeCryptoUnavailable`
    when the backend cannot do X25519.
    """

    name = "native"

    def generate_keypair(self) -> KeyPair:
        try:
            priv = X25519PrivateKey.generate()
        except UnsupportedAlgorithm as e:
            raise NativeCryptoUnavailable("X25519 not supported by the OpenSSL build") from e
        except InternalError as e:
            # Includes OpenSSL RNG failures; the software path reports those itself.
            raise NativeCryptoUnavailable(f"OpenSSL key generation failed: {e}") from e
        der = priv.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
        try:
            private = from_pkcs8(der)
        except InvalidKeyFormat as e:
            raise NativeCryptoUnavailable("unexpected PKCS8 layout from backend") from e
        return KeyPair(public=to_wire_form(_export_public(priv.public_key())), private=private)

    def public_from_private(self, private_key: bytes) -> bytes:
        return _export_public(_load_private(private_key).public_key())

    def shared_key(self, private_key: bytes, public_key: bytes) -> bytes:
        priv = _load_private(private_key)
        pub = _load_public(public_key)
        try:
            return priv.exchange(pub)
        except ValueError as e:
            # OpenSSL rejects the all-zero output of low-order points.
            raise InvalidPublicKey("agreement with low-order public key") from e

    def sign(self, private_key: bytes, message: bytes) -> bytes:
        return curve25519_sign(private_key, message)

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        return curve25519_verify(public_key, message, signature)
