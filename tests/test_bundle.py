from __future__ import annotations

import dataclasses

import pytest

from pykeyhelper.bundle import build_pre_key_bundle, verify_pre_key_bundle
from pykeyhelper.exceptions import InvalidArgument, InvalidSignature
from pykeyhelper.keyhelper import (
    generate_identity_key_pair,
    generate_pre_key,
    generate_registration_id,
    generate_signed_pre_key,
)


def test_bundle_contains_only_public_material() -> None:
    idk = generate_identity_key_pair()
    spk = generate_signed_pre_key(idk, 3)
    pk = generate_pre_key(9)
    rid = generate_registration_id()

    bundle = build_pre_key_bundle(idk, rid, spk, pk)

    assert bundle.registration_id == rid
    assert bundle.identity_key == idk.public
    assert bundle.signed_pre_key.key_id == 3
    assert bundle.signed_pre_key.public_key == spk.key_pair.public
    assert bundle.signed_pre_key.signature == spk.signature
    assert bundle.pre_key is not None
    assert bundle.pre_key.key_id == 9
    assert bundle.pre_key.public_key == pk.key_pair.public
    assert bundle.pre_key.signature is None
    assert verify_pre_key_bundle(bundle) is True


def test_bundle_without_one_time_pre_key() -> None:
    idk = generate_identity_key_pair()
    bundle = build_pre_key_bundle(idk, 1, generate_signed_pre_key(idk, 1))
    assert bundle.pre_key is None
    assert verify_pre_key_bundle(bundle) is True


def test_tampered_bundle_fails_verification() -> None:
    idk = generate_identity_key_pair()
    bundle = build_pre_key_bundle(idk, 1, generate_signed_pre_key(idk, 1))

    forged = dataclasses.replace(
        bundle,
        signed_pre_key=dataclasses.replace(
            bundle.signed_pre_key, public_key=generate_pre_key(2).key_pair.public
        ),
    )
    assert verify_pre_key_bundle(forged) is False

    unsigned = dataclasses.replace(
        bundle, signed_pre_key=dataclasses.replace(bundle.signed_pre_key, signature=None)
    )
    with pytest.raises(InvalidSignature):
        verify_pre_key_bundle(unsigned)


@pytest.mark.parametrize("rid", [-1, 0x4000, "1", True])
def test_bundle_rejects_bad_registration_id(rid) -> None:
    idk = generate_identity_key_pair()
    with pytest.raises(InvalidArgument):
        build_pre_key_bundle(idk, rid, generate_signed_pre_key(idk, 1))
