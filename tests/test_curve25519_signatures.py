from __future__ import annotations

import pytest

from pykeyhelper.crypto.curve import DefaultCurve25519Provider
from pykeyhelper.curve import VerifyMode, calculate_signature, generate_keypair, verify_signature
from pykeyhelper.exceptions import (
    InvalidArgument,
    InvalidMessage,
    InvalidPrivateKey,
    InvalidPublicKey,
    InvalidSignature,
)

from .vectors import SIG_EXPECTED, SIG_MESSAGE, SIG_PRIVATE, SIG_PUBLIC


def test_curve25519_signature_known_vector() -> None:
    curve = DefaultCurve25519Provider()

    sig = calculate_signature(SIG_PRIVATE, SIG_MESSAGE, curve=curve)
    assert sig == SIG_EXPECTED
    assert verify_signature(b"\x05" + SIG_PUBLIC, SIG_MESSAGE, sig, VerifyMode.FULL) is True


def test_bare_public_key_is_accepted_with_warning(caplog) -> None:
    with caplog.at_level("WARNING", logger="pykeyhelper.curve"):
        assert verify_signature(SIG_PUBLIC, SIG_MESSAGE, SIG_EXPECTED, VerifyMode.FULL) is True
    assert "bare 32-byte" in caplog.text


def test_sign_verify_roundtrip(curve) -> None:
    kp = generate_keypair(curve=curve)
    for msg in (b"x", b"hello world", kp.public, bytes(1000)):
        sig = calculate_signature(kp.private, msg, curve=curve)
        assert len(sig) == 64
        assert verify_signature(kp.public, msg, sig, VerifyMode.FULL, curve=curve) is True


def test_signing_is_deterministic() -> None:
    kp = generate_keypair()
    assert calculate_signature(kp.private, b"m") == calculate_signature(kp.private, b"m")


@pytest.mark.parametrize("bit", [*range(0, 512, 13), 255, 256, 510, 511])
def test_flipping_any_signature_bit_fails_verification(bit: int) -> None:
    sig = bytearray(calculate_signature(SIG_PRIVATE, SIG_MESSAGE))
    sig[bit // 8] ^= 1 << (bit % 8)
    assert verify_signature(SIG_PUBLIC, SIG_MESSAGE, bytes(sig), VerifyMode.FULL) is False


def test_wrong_message_or_key_fails_verification() -> None:
    other = generate_keypair()
    assert verify_signature(SIG_PUBLIC, b"other message", SIG_EXPECTED, VerifyMode.FULL) is False
    assert verify_signature(other.public, SIG_MESSAGE, SIG_EXPECTED, VerifyMode.FULL) is False


def test_trust_on_first_use_skips_cryptographic_check() -> None:
    bogus = bytes(64)
    assert verify_signature(SIG_PUBLIC, SIG_MESSAGE, bogus, VerifyMode.TRUST_ON_FIRST_USE) is True
    assert verify_signature(SIG_PUBLIC, SIG_MESSAGE, bogus, VerifyMode.FULL) is False


@pytest.mark.parametrize("mode", list(VerifyMode))
def test_verify_rejects_malformed_input(mode: VerifyMode) -> None:
    with pytest.raises(InvalidPublicKey):
        verify_signature(b"\x05" * 31, SIG_MESSAGE, SIG_EXPECTED, mode)
    with pytest.raises(InvalidMessage):
        verify_signature(SIG_PUBLIC, b"", SIG_EXPECTED, mode)
    with pytest.raises(InvalidMessage):
        verify_signature(SIG_PUBLIC, None, SIG_EXPECTED, mode)  # type: ignore[arg-type]
    with pytest.raises(InvalidSignature):
        verify_signature(SIG_PUBLIC, SIG_MESSAGE, SIG_EXPECTED[:63], mode)
    with pytest.raises(InvalidSignature):
        verify_signature(SIG_PUBLIC, SIG_MESSAGE, None, mode)  # type: ignore[arg-type]


def test_verify_requires_explicit_mode() -> None:
    with pytest.raises(InvalidArgument):
        verify_signature(SIG_PUBLIC, SIG_MESSAGE, SIG_EXPECTED, True)  # type: ignore[arg-type]


def test_sign_rejects_malformed_input() -> None:
    with pytest.raises(InvalidPrivateKey):
        calculate_signature(SIG_PRIVATE[:31], SIG_MESSAGE)
    with pytest.raises(InvalidPrivateKey):
        calculate_signature(None, SIG_MESSAGE)  # type: ignore[arg-type]
    with pytest.raises(InvalidMessage):
        calculate_signature(SIG_PRIVATE, b"")
    with pytest.raises(InvalidMessage):
        calculate_signature(SIG_PRIVATE, None)  # type: ignore[arg-type]
