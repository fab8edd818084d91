"""One-time probe deciding whether the native X25519 backend is usable."""

from __future__ import annotations

import functools
import logging
from enum import Enum

from ..exceptions import NativeCryptoUnavailable
from .keyformat import to_raw_form
from .native import NativeCurve25519Provider
from .x25519 import x25519, x25519_base

logger = logging.getLogger(__name__)


class Backend(str, Enum):
    NATIVE = "native"
    SOFTWARE = "software"


def probe_native() -> None:
    """
    Exercise the native backend once and cross-check it against the software ladder.

    Raises `NativeCryptoUnavailable` if it is missing or disagrees.
    """

    native = NativeCurve25519Provider()
    try:
        ours = native.generate_keypair()
        theirs = native.generate_keypair()
        secret = native.shared_key(ours.private, to_raw_form(theirs.public))
    except NativeCryptoUnavailable:
        raise
    except Exception as e:
        raise NativeCryptoUnavailable(f"native X25519 probe failed: {e}") from e

    if x25519_base(ours.private) != to_raw_form(ours.public):
        raise NativeCryptoUnavailable("native public key differs from reference")
    if x25519(ours.private, to_raw_form(theirs.public)) != secret:
        raise NativeCryptoUnavailable("native shared secret differs from reference")


@functools.cache
def detect_backend() -> Backend:
    """Return the backend to use by default. Probed once per process."""

    try:
        probe_native()
    except NativeCryptoUnavailable as e:
        logger.debug("native X25519 unavailable, using software backend: %s", e)
        return Backend.SOFTWARE
    logger.debug("native X25519 available")
    return Backend.NATIVE
