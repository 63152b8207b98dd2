from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .core import FeedSession
from .options import FeedOptions, ImageSource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feed-normalizer",
        description="Normalize RSS/Atom feeds and print their items as JSON.",
    )
    parser.add_argument("sources", nargs="+", metavar="SOURCE", help="feed URL or local path")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--cache-dir", help="enable the cache in this directory")
    parser.add_argument("--ttl", type=int, help="cache lifetime in minutes")
    parser.add_argument("--date-format", help="strftime pattern for dates (default: epoch timestamp)")
    parser.add_argument("--summary-length", type=int, help="maximum summary length")
    parser.add_argument("--no-summary", action="store_true", help="do not build summaries")
    parser.add_argument(
        "--image-source",
        choices=[s.value for s in ImageSource],
        help="where RSS items look for images",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = FeedSession(FeedOptions.from_env())
    if args.ttl is not None:
        session.set("cache_ttl_minutes", args.ttl)
    if args.cache_dir:
        if not session.enable_cache(args.cache_dir, session.get("cache_ttl_minutes")):
            print(f"Cache directory {args.cache_dir} is not writable; caching disabled", file=sys.stderr)
    if args.date_format:
        session.set("date_format", args.date_format)
    if args.summary_length is not None:
        session.set("summary_max_length", args.summary_length)
    if args.no_summary:
        session.set("build_rss_summary", False)
    if args.image_source:
        session.set("image_source_preference", args.image_source)

    batch = session.parse(args.sources)
    if batch is None:
        print(session.get_last_error() or "There aren't items", file=sys.stderr)
        return 1

    json.dump(
        [[item.to_dict() for item in items] for items in batch],
        sys.stdout,
        ensure_ascii=False,
        indent=2,
    )
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
