from __future__ import annotations

import hmac

from ..constants import KEY_LEN
from ..exceptions import InvalidPublicKey
from ..keys import KeyPair
from .clamp import clamp_private_key
from .curve25519_signature import curve25519_sign, curve25519_verify
from .keyformat import to_wire_form
from .random import random_bytes
from .x25519 import x25519, x25519_base

_ZERO = bytes(KEY_LEN)


class SoftwareCurve25519Provider:
    """
    Pure-Python counterpart of `NativeCurve25519Provider`.

    Private keys are clamped before they are handed out, as OpenSSL does on
    generation, so both backends produce identically distributed key pairs.
    """

    name = "software"

    def generate_keypair(self) -> KeyPair:
        private = clamp_private_key(random_bytes(KEY_LEN))
        return KeyPair(public=to_wire_form(x25519_base(private)), private=private)

    def public_from_private(self, private_key: bytes) -> bytes:
        return x25519_base(private_key)

    def shared_key(self, private_key: bytes, public_key: bytes) -> bytes:
        secret = x25519(private_key, public_key)
        if hmac.compare_digest(secret, _ZERO):
            raise InvalidPublicKey("agreement with low-order public key")
        return secret

    def sign(self, private_key: bytes, message: bytes) -> bytes:
        return curve25519_sign(private_key, message)

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        return curve25519_verify(public_key, message, signature)
