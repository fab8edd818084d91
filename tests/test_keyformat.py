from __future__ import annotations

import pytest

from pykeyhelper.constants import PRIVATE_KEY_DER_PREFIX, PUBLIC_KEY_DER_PREFIX
from pykeyhelper.crypto.keyformat import (
    from_pkcs8,
    from_spki,
    to_pkcs8,
    to_raw_form,
    to_spki,
    to_wire_form,
)
from pykeyhelper.exceptions import InvalidKeyFormat

from .vectors import ALICE_PUBLIC


def test_wire_form_prefixes_key_type() -> None:
    wire = to_wire_form(ALICE_PUBLIC)
    assert len(wire) == 33
    assert wire[0] == 0x05
    assert wire[1:] == ALICE_PUBLIC


def test_raw_form_accepts_wire_and_bare_and_is_idempotent() -> None:
    wire = to_wire_form(ALICE_PUBLIC)
    assert to_raw_form(wire) == ALICE_PUBLIC
    assert to_raw_form(ALICE_PUBLIC) == ALICE_PUBLIC
    assert to_raw_form(to_raw_form(wire)) == to_raw_form(wire)
    assert to_raw_form(bytearray(wire)) == ALICE_PUBLIC


@pytest.mark.parametrize(
    "buf",
    [b"", b"\x05" * 31, b"\x06" + ALICE_PUBLIC, ALICE_PUBLIC + b"\x00\x00", b"\x05" + ALICE_PUBLIC + b"\x00"],
)
def test_raw_form_rejects_other_shapes(buf: bytes) -> None:
    with pytest.raises(InvalidKeyFormat):
        to_raw_form(buf)


def test_raw_form_rejects_non_bytes() -> None:
    with pytest.raises(InvalidKeyFormat):
        to_raw_form("05" * 33)  # type: ignore[arg-type]


def test_der_prefixes_are_fixed_length() -> None:
    assert len(PRIVATE_KEY_DER_PREFIX) == 16
    assert len(PUBLIC_KEY_DER_PREFIX) == 12
    assert PRIVATE_KEY_DER_PREFIX.hex() == "302e020100300506032b656e04220420"
    assert PUBLIC_KEY_DER_PREFIX.hex() == "302a300506032b656e032100"


def test_der_containers_strip_back_to_raw() -> None:
    key = bytes(range(32))
    assert to_pkcs8(key) == PRIVATE_KEY_DER_PREFIX + key
    assert to_spki(key) == PUBLIC_KEY_DER_PREFIX + key
    assert from_pkcs8(to_pkcs8(key)) == key
    assert from_spki(to_spki(key)) == key


def test_der_rejects_wrong_prefix_or_length() -> None:
    key = bytes(32)
    with pytest.raises(InvalidKeyFormat):
        from_spki(to_pkcs8(key))
    with pytest.raises(InvalidKeyFormat):
        from_pkcs8(to_pkcs8(key)[:-1])
    with pytest.raises(InvalidKeyFormat):
        to_pkcs8(bytes(31))


def test_der_matches_cryptography_encoding() -> None:
    from cryptography.hazmat.primitives import serialization
    from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey

    priv = X25519PrivateKey.from_private_bytes(bytes(range(32)))
    der = priv.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    assert der == to_pkcs8(bytes(range(32)))

    pub = priv.public_key()
    raw = pub.public_bytes(encoding=serialization.Encoding.Raw, format=serialization.PublicFormat.Raw)
    spki = pub.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    assert spki == to_spki(raw)
