"""
Fetch the demo user.

Smoke check for the user service: python -m umai.jobs.fetch_user [--id N]
"""

import argparse
import asyncio
import logging

from umai.clients.users import UserClient, get_user_info
from umai.config import settings

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = 2


async def run_fetch(user_id: int = DEFAULT_USER_ID) -> bool:
    """
    Fetch one user and log the result.

    Returns:
        True if the user was fetched
    """
    async with UserClient() as client:
        user_info = await get_user_info(client, user_id)
    return user_info is not None


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Fetch a demo user from the user service")
    parser.add_argument("--id", type=int, default=DEFAULT_USER_ID, dest="user_id")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return 0 if asyncio.run(run_fetch(args.user_id)) else 1


if __name__ == "__main__":
    raise SystemExit(main())
