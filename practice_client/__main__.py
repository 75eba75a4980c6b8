"""
Session command line
Usage: python -m practice_client login <username> | logout | whoami | get <endpoint>
"""
import argparse
import asyncio
import getpass
import json
import logging
import sys
from typing import Optional

from .client import PracticeClient
from .config import configure_logging
from .exceptions import ApiError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="practice_client", description="Practice API session tool")
    parser.add_argument("--base-url", help="Override API_BASE_URL")
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Sign in and store the session")
    login.add_argument("username")
    login.add_argument("--password", help="Prompted for when omitted")

    sub.add_parser("logout", help="Forget the stored session")
    sub.add_parser("whoami", help="Show the signed-in user")

    get = sub.add_parser("get", help="GET an endpoint with the stored session")
    get.add_argument("endpoint")
    return parser


async def run(args: argparse.Namespace) -> int:
    kwargs = {"base_url": args.base_url} if args.base_url else {}
    async with PracticeClient(**kwargs) as api:
        if args.command == "login":
            password = args.password or getpass.getpass("Password: ")
            user = await api.auth.login(args.username, password)
            print(json.dumps(user.model_dump(exclude_none=True), indent=2))
        elif args.command == "logout":
            api.auth.logout()
        elif args.command == "whoami":
            if not api.auth.user:
                logger.error("Not logged in. Run `python -m practice_client login <username>` first.")
                return 1
            print(json.dumps(api.auth.user.model_dump(exclude_none=True), indent=2))
        elif args.command == "get":
            result = await api.gateway.get(args.endpoint)
            print(json.dumps(result, indent=2, default=str))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except ApiError as e:
        logger.error(f"❌ {e.message}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
