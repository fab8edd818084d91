from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, cast, get_args

from .constants import BACKEND_ENV_VAR
from .exceptions import InvalidArgument

BackendPreference = Literal["auto", "native", "software"]


@dataclass(frozen=True, slots=True)
class CurveConfig:
    """
    Backend selection for `DefaultCurve25519Provider`.

    `"auto"` uses the native X25519 backend when the startup probe finds it
    usable. `"native"` and `"software"` pin one backend.
    """

    backend: BackendPreference = "auto"

    def __post_init__(self) -> None:
        if self.backend not in get_args(BackendPreference):
            raise InvalidArgument(f"unknown backend preference: {self.backend!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CurveConfig:
        env = os.environ if environ is None else environ
        raw = env.get(BACKEND_ENV_VAR, "").strip().lower()
        if not raw:
            return cls()
        return cls(backend=cast(BackendPreference, raw))
