from __future__ import annotations

import logging
from typing import Protocol

from ..config import CurveConfig
from ..exceptions import NativeCryptoUnavailable
from ..keys import KeyPair
from .backend import Backend, detect_backend
from .curve25519_signature import curve25519_sign, curve25519_verify
from .native import NativeCurve25519Provider
from .software import SoftwareCurve25519Provider

logger = logging.getLogger(__name__)


class Curve25519Provider(Protocol):
    """
    Raw-key Curve25519 operations.

    Keys passed in are already validated: 32-byte private scalars and 32-byte
    public points. `generate_keypair` returns the 33-byte public form.
    """

    def generate_keypair(self) -> KeyPair: ...

    def public_from_private(self, private_key: bytes) -> bytes: ...

    def shared_key(self, private_key: bytes, public_key: bytes) -> bytes: ...

    def sign(self, private_key: bytes, message: bytes) -> bytes: ...

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool: ...


class DefaultCurve25519Provider:
    """
    Native X25519 via `cryptography` when usable, pure Python otherwise.

    The backend is fixed at construction from `CurveConfig` and the cached
    startup probe. If a native call still reports the backend unavailable,
    that call is served by the software backend.

    Signatures are always computed in pure Python (libsignal-compatible XEdDSA).
    """

    def __init__(self, config: CurveConfig | None = None) -> None:
        self.config = config or CurveConfig()
        self._software = SoftwareCurve25519Provider()
        self._native: NativeCurve25519Provider | None = None

        if self.config.backend == "software":
            return
        available = detect_backend() is Backend.NATIVE
        if self.config.backend == "native" and not available:
            raise NativeCryptoUnavailable("native backend requested but not available")
        if available:
            self._native = NativeCurve25519Provider()

    @property
    def backend(self) -> Backend:
        return Backend.NATIVE if self._native is not None else Backend.SOFTWARE

    def _fallback(self, op: str, err: NativeCryptoUnavailable) -> None:
        logger.info("native %s failed (%s), using software backend", op, err)

    def generate_keypair(self) -> KeyPair:
        if self._native is not None:
            try:
                return self._native.generate_keypair()
            except NativeCryptoUnavailable as e:
                self._fallback("key generation", e)
        return self._software.generate_keypair()

    def public_from_private(self, private_key: bytes) -> bytes:
        if self._native is not None:
            try:
                return self._native.public_from_private(private_key)
            except NativeCryptoUnavailable as e:
                self._fallback("public key derivation", e)
        return self._software.public_from_private(private_key)

    def shared_key(self, private_key: bytes, public_key: bytes) -> bytes:
        if self._native is not None:
            try:
                return self._native.shared_key(private_key, public_key)
            except NativeCryptoUnavailable as e:
                self._fallback("agreement", e)
        return self._software.shared_key(private_key, public_key)

    def sign(self, private_key: bytes, message: bytes) -> bytes:
        return curve25519_sign(private_key, message)

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        return curve25519_verify(public_key, message, signature)
