from __future__ import annotations

# Libsignal: public keys on the wire carry a one-byte key type.
KEY_BUNDLE_TYPE = b"\x05"
CURVE_TYPE = KEY_BUNDLE_TYPE[0]

KEY_LEN = 32
PUBLIC_KEY_WIRE_LEN = KEY_LEN + len(KEY_BUNDLE_TYPE)
SIGNATURE_LEN = 64

# ASN.1 headers for X25519 keys (OID 1.3.101.110), fixed-length so they can be
# stripped/prepended instead of parsed.
PUBLIC_KEY_DER_PREFIX = bytes([48, 42, 48, 5, 6, 3, 43, 101, 110, 3, 33, 0])  # SPKI
PRIVATE_KEY_DER_PREFIX = bytes(
    [48, 46, 2, 1, 0, 48, 5, 6, 3, 43, 101, 110, 4, 34, 4, 32]
)  # PKCS8

# Registration ids are 14 bits.
REGISTRATION_ID_MASK = 0x3FFF

BACKEND_ENV_VAR = "PYKEYHELPER_BACKEND"
