# src/pkg_token/tools/cli.py

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Sequence

from ..domain.exceptions import AuthenticationError
from ..domain.payload import Payload
from ..integrations.common.auth_factory import create_token_auth
from .env import parse_duration, settings_from_env


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pkg-token",
        description="Issue and verify access tokens "
                    "(configured from TOKEN_SYMMETRIC_KEY / TOKEN_TYPE / ACCESS_TOKEN_DURATION)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "WARNING"),
        help="Logging level (default: env LOG_LEVEL or WARNING).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    issue = sub.add_parser("issue", help="Issue a token for a username and role.")
    issue.add_argument("--username", "-u", required=True)
    issue.add_argument("--role", "-r", required=True)
    issue.add_argument(
        "--duration",
        "-d",
        type=parse_duration,
        help="Token lifetime, e.g. 900, 15m, 1h "
             "(defaults from env ACCESS_TOKEN_DURATION).",
    )

    verify = sub.add_parser("verify", help="Verify a token and print its payload.")
    verify.add_argument("token")

    return parser.parse_args(args=argv)


def _payload_summary(payload: Payload) -> dict[str, Any]:
    return {"payload": payload.to_claims()}


def _run(args: argparse.Namespace) -> dict[str, Any]:
    settings = settings_from_env()
    auth = create_token_auth(settings)

    if args.command == "issue":
        issued = auth.issue(args.username, args.role, args.duration)
        return {
            "token_type": settings.token_type.value,
            "token": issued.token,
            **_payload_summary(issued.payload),
        }

    payload = auth.authenticate(args.token)
    return _payload_summary(payload)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=str(args.log_level).upper(), stream=sys.stderr)

    try:
        summary = _run(args)
    except AuthenticationError as exc:
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 1
    except Exception as exc:  # noqa: BLE001
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        raise

    json.dump({"ok": True, **summary}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
