"""Command-line entrypoint running a single video search."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from video_search.config import get_settings
from video_search.domain.models import DEFAULT_COUNT
from video_search.logging import configure_logging, logger
from video_search.server import ToolServer
from video_search.services.exceptions import ToolServiceError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search Brave for videos.")
    parser.add_argument("query", help="The term to search the internet for videos of")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--freshness", default=None, help="pd, pw, pm, py or YYYY-MM-DDtoYYYY-MM-DD")
    return parser


async def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    payload = {"query": args.query, "count": args.count}
    if args.freshness is not None:
        payload["freshness"] = args.freshness

    async with ToolServer(settings=settings) as server:
        try:
            result = await server.video_search_tool().execute(payload)
        except ToolServiceError as exc:
            logger.error("video_search_cli_failed", error=str(exc))
            print(str(exc), file=sys.stderr)
            return 1

    print(result.text)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
