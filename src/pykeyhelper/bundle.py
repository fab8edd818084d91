from __future__ import annotations

from dataclasses import dataclass

from .constants import REGISTRATION_ID_MASK
from .crypto.curve import Curve25519Provider
from .crypto.keyformat import to_raw_form, to_wire_form
from .curve import VerifyMode, verify_signature
from .exceptions import InvalidArgument
from .keys import KeyPair, PreKey, SignedPreKey


@dataclass(frozen=True, slots=True)
class PreKeyBundleKey:
    key_id: int
    public_key: bytes  # 33 bytes (0x05 + 32)
    signature: bytes | None = None


@dataclass(frozen=True, slots=True)
class PreKeyBundle:
    """
    Public half of an account's prekeys, as published for peers.

    `pre_key` is optional: a bundle without a one-time prekey is still usable
    for session setup.
    """

    registration_id: int
    identity_key: bytes  # 33 bytes (0x05 + 32)
    signed_pre_key: PreKeyBundleKey
    pre_key: PreKeyBundleKey | None = None


def build_pre_key_bundle(
    identity_key_pair: KeyPair,
    registration_id: int,
    signed_pre_key: SignedPreKey,
    pre_key: PreKey | None = None,
) -> PreKeyBundle:
    """Drop the private halves of our key material into a publishable bundle."""

    if (
        not isinstance(registration_id, int)
        or isinstance(registration_id, bool)
        or not 0 <= registration_id <= REGISTRATION_ID_MASK
    ):
        raise InvalidArgument(f"Invalid argument for registration_id: {registration_id!r}")

    def _pub(kp: KeyPair) -> bytes:
        return to_wire_form(to_raw_form(kp.public))

    return PreKeyBundle(
        registration_id=registration_id,
        identity_key=_pub(identity_key_pair),
        signed_pre_key=PreKeyBundleKey(
            key_id=signed_pre_key.key_id,
            public_key=_pub(signed_pre_key.key_pair),
            signature=signed_pre_key.signature,
        ),
        pre_key=(
            PreKeyBundleKey(key_id=pre_key.key_id, public_key=_pub(pre_key.key_pair))
            if pre_key is not None
            else None
        ),
    )


def verify_pre_key_bundle(
    bundle: PreKeyBundle, *, curve: Curve25519Provider | None = None
) -> bool:
    """Check the signed prekey's signature against the bundle's identity key."""

    spk = bundle.signed_pre_key
    return verify_signature(
        bundle.identity_key,
        spk.public_key,
        spk.signature,  # type: ignore[arg-type]
        VerifyMode.FULL,
        curve=curve,
    )
