"""
Dict/JSON forms of key material for the caller's persistence layer.

Bytes are encoded the way Baileys' BufferJSON does it:
`{"type": "Buffer", "data": "<base64>"}`.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from .bundle import PreKeyBundle, PreKeyBundleKey
from .keys import KeyPair, PreKey, SignedPreKey


def _expect_bytes(v: Any, *, field: str) -> bytes:
    if isinstance(v, (bytes, bytearray, memoryview)):
        return bytes(v)
    raise TypeError(f"Expected bytes for {field}, got {type(v).__name__}")


def _expect_int(v: Any, *, field: str) -> int:
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    raise TypeError(f"Expected int for {field}, got {type(v).__name__}")


def keypair_to_dict(kp: KeyPair) -> dict[str, Any]:
    return {"public": kp.public, "private": kp.private}


def keypair_from_dict(d: dict[str, Any]) -> KeyPair:
    return KeyPair(
        public=_expect_bytes(d["public"], field="KeyPair.public"),
        private=_expect_bytes(d["private"], field="KeyPair.private"),
    )


def signed_pre_key_to_dict(spk: SignedPreKey) -> dict[str, Any]:
    return {
        "key_id": spk.key_id,
        "key_pair": keypair_to_dict(spk.key_pair),
        "signature": spk.signature,
    }


def signed_pre_key_from_dict(d: dict[str, Any]) -> SignedPreKey:
    return SignedPreKey(
        key_id=_expect_int(d["key_id"], field="SignedPreKey.key_id"),
        key_pair=keypair_from_dict(d["key_pair"]),
        signature=_expect_bytes(d["signature"], field="SignedPreKey.signature"),
    )


def pre_key_to_dict(pk: PreKey) -> dict[str, Any]:
    return {"key_id": pk.key_id, "key_pair": keypair_to_dict(pk.key_pair)}


def pre_key_from_dict(d: dict[str, Any]) -> PreKey:
    return PreKey(
        key_id=_expect_int(d["key_id"], field="PreKey.key_id"),
        key_pair=keypair_from_dict(d["key_pair"]),
    )


def _bundle_key_to_dict(k: PreKeyBundleKey) -> dict[str, Any]:
    out: dict[str, Any] = {"key_id": k.key_id, "public_key": k.public_key}
    if k.signature is not None:
        out["signature"] = k.signature
    return out


def _bundle_key_from_dict(d: dict[str, Any], *, field: str) -> PreKeyBundleKey:
    sig = d.get("signature")
    return PreKeyBundleKey(
        key_id=_expect_int(d["key_id"], field=f"{field}.key_id"),
        public_key=_expect_bytes(d["public_key"], field=f"{field}.public_key"),
        signature=_expect_bytes(sig, field=f"{field}.signature") if sig is not None else None,
    )


def pre_key_bundle_to_dict(b: PreKeyBundle) -> dict[str, Any]:
    out: dict[str, Any] = {
        "registration_id": b.registration_id,
        "identity_key": b.identity_key,
        "signed_pre_key": _bundle_key_to_dict(b.signed_pre_key),
    }
    if b.pre_key is not None:
        out["pre_key"] = _bundle_key_to_dict(b.pre_key)
    return out


def pre_key_bundle_from_dict(d: dict[str, Any]) -> PreKeyBundle:
    return PreKeyBundle(
        registration_id=_expect_int(d["registration_id"], field="PreKeyBundle.registration_id"),
        identity_key=_expect_bytes(d["identity_key"], field="PreKeyBundle.identity_key"),
        signed_pre_key=_bundle_key_from_dict(
            d["signed_pre_key"], field="PreKeyBundle.signed_pre_key"
        ),
        pre_key=(
            _bundle_key_from_dict(d["pre_key"], field="PreKeyBundle.pre_key")
            if d.get("pre_key")
            else None
        ),
    )


def _default(obj: Any) -> Any:
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return {"type": "Buffer", "data": base64.b64encode(bytes(obj)).decode("ascii")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _object_hook(obj: dict[str, Any]) -> Any:
    if obj.get("type") == "Buffer" and isinstance(obj.get("data"), str):
        try:
            return base64.b64decode(obj["data"].encode("ascii"), validate=True)
        except binascii.Error as e:
            raise ValueError("invalid base64 in Buffer field") from e
    return obj


def dumps(obj: Any, *, indent: int | None = None) -> str:
    """JSON-encode dicts produced by the `*_to_dict` helpers."""

    return json.dumps(obj, default=_default, indent=indent, sort_keys=True)


def loads(data: str) -> Any:
    return json.loads(data, object_hook=_object_hook)
