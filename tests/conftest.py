from __future__ import annotations

import pytest

from pykeyhelper.crypto import (
    Backend,
    NativeCurve25519Provider,
    SoftwareCurve25519Provider,
    detect_backend,
)

_needs_native = pytest.mark.skipif(
    detect_backend() is not Backend.NATIVE, reason="native X25519 backend unavailable"
)


@pytest.fixture(
    params=[
        pytest.param("software", id="software"),
        pytest.param("native", id="native", marks=_needs_native),
    ]
)
def curve(request):
    if request.param == "native":
        return NativeCurve25519Provider()
    return SoftwareCurve25519Provider()


@pytest.fixture
def software() -> SoftwareCurve25519Provider:
    return SoftwareCurve25519Provider()


@pytest.fixture
def native() -> NativeCurve25519Provider:
    if detect_backend() is not Backend.NATIVE:
        pytest.skip("native X25519 backend unavailable")
    return NativeCurve25519Provider()
