"""
pykeyhelper: Signal-protocol key agreement and prekey generation.

Identity keys, registration ids, signed and one-time prekeys, plus the
Curve25519 primitives they rest on (X25519 agreement and libsignal-compatible
XEdDSA signatures), with a native `cryptography` backend and a pure-Python
fallback that produce identical results.
"""

from __future__ import annotations

from .bundle import PreKeyBundle, PreKeyBundleKey, build_pre_key_bundle, verify_pre_key_bundle
from .config import CurveConfig
from .crypto import Backend, Curve25519Provider, DefaultCurve25519Provider
from .curve import (
    VerifyMode,
    calculate_agreement,
    calculate_signature,
    derive_public_from_private,
    generate_keypair,
    verify_signature,
)
from .exceptions import (
    InvalidArgument,
    InvalidKeyFormat,
    InvalidMessage,
    InvalidPrivateKey,
    InvalidPublicKey,
    InvalidSignature,
    KeyHelperError,
    RandomnessUnavailable,
)
from .keyhelper import (
    generate_identity_key_pair,
    generate_pre_key,
    generate_pre_keys,
    generate_registration_id,
    generate_signed_pre_key,
)
from .keys import KeyPair, PreKey, SignedPreKey

__all__ = [
    "Backend",
    "Curve25519Provider",
    "CurveConfig",
    "DefaultCurve25519Provider",
    "InvalidArgument",
    "InvalidKeyFormat",
    "InvalidMessage",
    "InvalidPrivateKey",
    "InvalidPublicKey",
    "InvalidSignature",
    "KeyHelperError",
    "KeyPair",
    "PreKey",
    "PreKeyBundle",
    "PreKeyBundleKey",
    "RandomnessUnavailable",
    "SignedPreKey",
    "VerifyMode",
    "build_pre_key_bundle",
    "calculate_agreement",
    "calculate_signature",
    "derive_public_from_private",
    "generate_identity_key_pair",
    "generate_keypair",
    "generate_pre_key",
    "generate_pre_keys",
    "generate_registration_id",
    "generate_signed_pre_key",
    "verify_pre_key_bundle",
    "verify_signature",
]

__version__ = "0.1.0"
