# src/jwthmac/cli.py

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from .coder import decode, encode
from .config import settings_from_env
from .domain.exceptions import AuthenticationError, SigningError


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jwthmac",
        description="Mint and inspect HS256 access tokens "
                    "(settings from JWT_SIGNING_KEY, JWT_ISSUER, JWT_EXPIRY_MS)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Sign a token for a user and its scopes.")
    enc.add_argument(
        "--user",
        "-u",
        required=True,
        help="User id to place in the 'usr' claim (taken as-is).",
    )
    enc.add_argument(
        "--scope",
        "-s",
        dest="scopes",
        action="append",
        default=[],
        help="Scope to grant; repeat for several. Order is preserved.",
    )

    dec = sub.add_parser("decode", help="Verify a token and print its user and scopes.")
    dec.add_argument("token", help="Encoded token, or '-' to read it from stdin.")

    return parser.parse_args(args=argv)


def _run(args: argparse.Namespace) -> dict[str, Any]:
    settings = settings_from_env()

    if args.command == "encode":
        return {"token": encode(settings, args.user, list(args.scopes))}

    token = sys.stdin.read().strip() if args.token == "-" else args.token
    scopes, user_id = decode(settings, token)
    return {"user": user_id, "scopes": scopes}


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        summary = _run(args)
    except (AuthenticationError, SigningError, RuntimeError) as exc:
        json.dump(
            {"ok": False, "error": str(exc), "type": type(exc).__name__},
            sys.stdout,
            indent=2,
        )
        sys.stdout.write("\n")
        return 1

    if args.command == "encode":
        sys.stdout.write(summary["token"] + "\n")
    else:
        json.dump({"ok": True, **summary}, sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
