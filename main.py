#!/usr/bin/env python
"""CLI for the newsfeed keyword search service."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from newsfeed.config import create_from_config, get_default_config_path, load_config
from newsfeed.data import TimeUnit
from newsfeed.errors import InvalidKeywordError, NoContentError
from newsfeed.service import NewsService

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    keyword: str | None = None
    config: Path
    offline: bool = False
    interval: int | None = Field(default=None, ge=1)
    unit: TimeUnit = TimeUnit.HOURS
    serve: bool = False
    host: str = "127.0.0.1"
    port: int = 8080

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(service: NewsService, args: CLIArgs) -> None:
    """Run one search (grouped when an interval is given) and print the result.

    Args:
        service: Configured news service.
        args: Validated CLI arguments.
    """
    keyword = args.keyword or ""
    if args.interval is None:
        result = await service.search(keyword)
        print(f"\nFound {result.total_results} articles for {keyword!r}:\n")
        for i, article in enumerate(result.articles, 1):
            print(f"{i}. {article.title}")
            print(f"   URL: {article.url}")
            print(f"   Published: {article.published_at}")
        return

    buckets = await service.grouped_search(keyword, args.interval, args.unit)
    for label, bucket in buckets.items():
        print(f"\n{label} ({bucket.count}):")
        for article in bucket.articles:
            print(f"  - {article.title} [{article.published_at}]")


def serve(service: NewsService, args: CLIArgs) -> None:
    import uvicorn

    from newsfeed.api import create_app

    uvicorn.run(create_app(service), host=args.host, port=args.port)


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search news by keyword.")
    parser.add_argument("keyword", nargs="?", help="Search keyword (letters and digits)")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: the packaged default.yaml)",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        default=False,
        help="Search the built-in example articles instead of the provider",
    )
    parser.add_argument("--interval", type=int, default=None, help="Group results by this width")
    parser.add_argument(
        "--unit",
        type=str,
        default="hours",
        help="Unit of --interval: minutes, hours, days, weeks, months, years (default: hours)",
    )
    parser.add_argument("--serve", action="store_true", default=False, help="Run the HTTP API")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            keyword=ns.keyword,
            config=config_path,
            offline=ns.offline,
            interval=ns.interval,
            unit=ns.unit,
            serve=ns.serve,
            host=ns.host,
            port=ns.port,
        )
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    config = load_config(args.config)
    logging.basicConfig(level=config.logging.level, format="%(levelname)s %(name)s: %(message)s")

    service = create_from_config(config)
    if args.offline:
        service.set_mode("offline")

    if args.serve:
        serve(service, args)
        return

    try:
        asyncio.run(run(service, args))
    except InvalidKeywordError as e:
        logger.error(str(e))
        sys.exit(1)
    except NoContentError as e:
        logger.info(str(e))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
