"""Command line access to the Green Groves API.

Usage:
    python -m greengroves login admin@example.com secret
    python -m greengroves list articles --status published
    python -m greengroves get tools 12
    python -m greengroves delete contact 7
    python -m greengroves logout

Set GREENGROVES_STORAGE_BACKEND=file to keep the session between runs.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from pydantic import BaseModel, ValidationError

from greengroves.app import RESOURCES, GreenGroves
from greengroves.config.settings import get_settings
from greengroves.errors import GreenGrovesError

logger = logging.getLogger("greengroves")


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def _print(value: Any) -> None:
    print(json.dumps(_jsonable(value), indent=2, ensure_ascii=False, default=str))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="greengroves", description="Green Groves API client")
    parser.add_argument("--base-url", help="Override GREENGROVES_API_BASE_URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Log in and store the token")
    login.add_argument("email")
    login.add_argument("password")

    sub.add_parser("logout", help="Revoke the token and clear local state")
    sub.add_parser("whoami", help="Show the current user")

    list_cmd = sub.add_parser("list", help="List a resource")
    list_cmd.add_argument("resource", choices=RESOURCES)
    list_cmd.add_argument("--status")
    list_cmd.add_argument("--page", type=int)
    list_cmd.add_argument("--per-page", type=int)

    get_cmd = sub.add_parser("get", help="Show one item")
    get_cmd.add_argument("resource", choices=RESOURCES)
    get_cmd.add_argument("id")

    delete_cmd = sub.add_parser("delete", help="Delete one item")
    delete_cmd.add_argument("resource", choices=RESOURCES)
    delete_cmd.add_argument("id")

    return parser


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    if args.base_url:
        settings = settings.model_copy(update={"api_base_url": args.base_url.rstrip("/")})

    async with GreenGroves.from_settings(settings) as gg:
        if args.command == "login":
            session = await gg.auth.login(args.email, args.password)
            _print(session.user or {"token_type": session.token_type})
        elif args.command == "logout":
            await gg.auth.logout()
        elif args.command == "whoami":
            _print(await gg.auth.me())
        elif args.command == "list":
            params = {"page": args.page, "per_page": args.per_page}
            if args.status:
                params["status"] = args.status
            page = await gg.resource(args.resource).list_page(**params)
            _print(page.items)
            logger.info(
                "Page %d/%d, %d total",
                page.meta.current_page,
                page.meta.last_page,
                page.meta.total,
            )
        elif args.command == "get":
            _print(await gg.resource(args.resource).get(args.id))
        elif args.command == "delete":
            await gg.resource(args.resource).delete(args.id)
            logger.info("Deleted %s %s", args.resource, args.id)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return asyncio.run(run(args))
    except (GreenGrovesError, ValidationError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
