from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeyPair:
    public: bytes  # 33 bytes (0x05 + 32)
    private: bytes  # 32 bytes


@dataclass(frozen=True, slots=True)
class SignedPreKey:
    """
    Medium-term prekey signed by the account's identity key.

    `signature` covers the 33-byte form of `key_pair.public`.
    """

    key_id: int
    key_pair: KeyPair
    signature: bytes


@dataclass(frozen=True, slots=True)
class PreKey:
    key_id: int
    key_pair: KeyPair
