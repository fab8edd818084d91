"""
Generate fresh account key material and print it as JSON.

The private output is what a persistence layer would store; the bundle is what
gets published for peers.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pykeyhelper import (
    CurveConfig,
    DefaultCurve25519Provider,
    build_pre_key_bundle,
    generate_identity_key_pair,
    generate_pre_keys,
    generate_registration_id,
    generate_signed_pre_key,
    verify_pre_key_bundle,
)
from pykeyhelper import serde


def main() -> None:
    ap = argparse.ArgumentParser(prog="generate_bundle.py")
    ap.add_argument("--pre-keys", type=int, default=10, help="one-time prekeys to generate")
    ap.add_argument("--signed-key-id", type=int, default=1)
    ap.add_argument(
        "--backend",
        choices=["auto", "native", "software"],
        default=None,
        help="curve backend (default: $PYKEYHELPER_BACKEND or auto)",
    )
    ap.add_argument("--out", default=None, help="write private key material to this JSON file")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = CurveConfig(backend=args.backend) if args.backend else CurveConfig.from_env()
    curve = DefaultCurve25519Provider(config)
    print("backend:", curve.backend.value)

    identity = generate_identity_key_pair(curve=curve)
    registration_id = generate_registration_id()
    signed_pre_key = generate_signed_pre_key(identity, args.signed_key_id, curve=curve)
    pre_keys = generate_pre_keys(1, args.pre_keys, curve=curve)

    bundle = build_pre_key_bundle(
        identity, registration_id, signed_pre_key, pre_keys[0] if pre_keys else None
    )
    if not verify_pre_key_bundle(bundle, curve=curve):
        raise SystemExit("generated bundle failed signature verification")
    print(serde.dumps(serde.pre_key_bundle_to_dict(bundle), indent=2))

    if args.out:
        private = {
            "identity_key": serde.keypair_to_dict(identity),
            "registration_id": registration_id,
            "signed_pre_key": serde.signed_pre_key_to_dict(signed_pre_key),
            "pre_keys": [serde.pre_key_to_dict(pk) for pk in pre_keys],
        }
        out = Path(args.out).expanduser().resolve()
        out.write_text(serde.dumps(private, indent=2), "utf-8")
        print(f"wrote {out}")


if __name__ == "__main__":
    main()
