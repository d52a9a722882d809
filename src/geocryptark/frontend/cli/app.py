"""Command line front end for GeoCryptArk.

Start here with `python -m geocryptark.frontend.cli.app` or the `geocryptark`
console script.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from geocryptark.core.coordinates import validate_coordinates
from geocryptark.core.exceptions import GeoCryptArkError
from geocryptark.core.models import GeoCoordinate
from geocryptark.frontend.cli.context import AppContext, build_context
from geocryptark.frontend.cli.logging_config import configure_logging
from geocryptark.security.encryption import FIRST_LAYER_NONCE, NONCE_SIZE
from geocryptark.security.envelope import multi_key_encrypt
from geocryptark.security.geohash import generate_geo_hash
from geocryptark.security.kdf import kdf_params_to_dict

logger = logging.getLogger(__name__)


def _coordinate(text: str) -> GeoCoordinate:
    try:
        return GeoCoordinate.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _read_plaintext(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


# === Commands ===


def cmd_validate(args: argparse.Namespace, ctx: AppContext) -> int:
    ok = validate_coordinates(args.lat, args.lng)
    print("valid" if ok else "invalid")
    return 0 if ok else 1


def cmd_geohash(args: argparse.Namespace, ctx: AppContext) -> int:
    geo_hash = asyncio.run(
        generate_geo_hash(
            args.lat, args.lng, args.salt, ctx.common_password, provider=ctx.provider
        )
    )
    print(geo_hash)
    return 0


def cmd_encrypt(args: argparse.Namespace, ctx: AppContext) -> int:
    plaintext = _read_plaintext(args.input)
    result = asyncio.run(
        multi_key_encrypt(
            plaintext, args.coords, args.salt, ctx.common_password, provider=ctx.provider
        )
    )
    payload = result.to_json(indent=args.indent)
    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote %d wrapped keys to %s", len(result.keys), args.output)
    else:
        print(payload)
    return 0


def cmd_info(args: argparse.Namespace, ctx: AppContext) -> int:
    info = {
        "kdf": kdf_params_to_dict(),
        "cipher": "aes-256-gcm",
        "nonce_size": NONCE_SIZE,
        "first_layer_nonce": FIRST_LAYER_NONCE.hex(),
    }
    print(json.dumps(info, indent=2))
    return 0


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geocryptark",
        description="Location-gated multi-recipient envelope encryption.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level name (default: $GEOCRYPTARK_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Check that a coordinate pair is in range")
    p_validate.add_argument("lat", type=float)
    p_validate.add_argument("lng", type=float)
    p_validate.set_defaults(func=cmd_validate, needs_password=False)

    p_hash = sub.add_parser("geohash", help="Print the geo-hash for one location")
    p_hash.add_argument("lat", type=float)
    p_hash.add_argument("lng", type=float)
    p_hash.add_argument("--salt", required=True)
    p_hash.add_argument(
        "--password",
        default=None,
        help="Common password (default: $GEOCRYPTARK_COMMON_PASSWORD, else prompt)",
    )
    p_hash.set_defaults(func=cmd_geohash, needs_password=True)

    p_enc = sub.add_parser("encrypt", help="Encrypt text for one or more locations")
    p_enc.add_argument(
        "--coord",
        dest="coords",
        action="append",
        type=_coordinate,
        required=True,
        help="Location as LAT,LNG; repeat for each recipient. "
        "Use --coord=-33.86,151.2 for negative latitudes.",
    )
    p_enc.add_argument("--salt", required=True)
    p_enc.add_argument(
        "--password",
        default=None,
        help="Common password (default: $GEOCRYPTARK_COMMON_PASSWORD, else prompt)",
    )
    p_enc.add_argument("--input", default="-", help="Plaintext file, or - for stdin (default: -)")
    p_enc.add_argument("--output", default=None, help="Write JSON here instead of stdout")
    p_enc.add_argument("--indent", type=int, default=None)
    p_enc.set_defaults(func=cmd_encrypt, needs_password=True)

    p_info = sub.add_parser("info", help="Show the fixed KDF and cipher parameters")
    p_info.set_defaults(func=cmd_info, needs_password=False)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    try:
        ctx = build_context(
            log_level=args.log_level,
            password=getattr(args, "password", None),
            need_password=args.needs_password,
        )
        configure_logging(ctx.log_level)
        return args.func(args, ctx)
    except GeoCryptArkError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
