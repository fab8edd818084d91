from __future__ import annotations


class KeyHelperError(Exception):
    """Base error for the pykeyhelper library."""


class InvalidKeyFormat(KeyHelperError, ValueError):
    """Key bytes do not match any accepted encoding."""


class InvalidPrivateKey(InvalidKeyFormat):
    """Private key is not a 32-byte Curve25519 scalar."""


class InvalidPublicKey(InvalidKeyFormat):
    """
    Public key is neither the 33-byte `0x05`-prefixed form nor a bare 32-byte point.

    Also raised when an agreement against the point yields the all-zero secret.
    """


class InvalidMessage(KeyHelperError, ValueError):
    """Message to sign or verify is empty or not bytes-like."""


class InvalidSignature(KeyHelperError, ValueError):
    """Signature is structurally invalid (not 64 bytes)."""


class InvalidArgument(KeyHelperError, TypeError):
    """Malformed key id, registration id or key pair argument."""


class RandomnessUnavailable(KeyHelperError):
    """The operating system's secure random source failed."""


class NativeCryptoUnavailable(KeyHelperError):
    """
    The `cryptography` X25519 backend cannot be used.

    Handled inside the curve provider, which switches to the software backend.
    """
