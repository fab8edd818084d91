from __future__ import annotations

from .backend import Backend, detect_backend
from .curve import Curve25519Provider, DefaultCurve25519Provider
from .keyformat import from_pkcs8, from_spki, to_pkcs8, to_raw_form, to_spki, to_wire_form
from .native import NativeCurve25519Provider
from .software import SoftwareCurve25519Provider

__all__ = [
    "Backend",
    "Curve25519Provider",
    "DefaultCurve25519Provider",
    "NativeCurve25519Provider",
    "SoftwareCurve25519Provider",
    "detect_backend",
    "from_pkcs8",
    "from_spki",
    "to_pkcs8",
    "to_raw_form",
    "to_spki",
    "to_wire_form",
]
