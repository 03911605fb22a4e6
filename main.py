#!/usr/bin/env python3
"""
Photo Scout
Finds the highest resolution photos on a business website
"""

import argparse
import asyncio
import json
import sys
from photo_scout.config import CrawlConfig, RankConfig, DEFAULT_MAX_IMAGES, DEFAULT_PAGE_TIMEOUT, DEFAULT_IMAGE_TIMEOUT
from photo_scout.monitoring import LogManager
from photo_scout.pipeline import search_photos


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the best photos on a business website")
    parser.add_argument("url", help="Root URL of the website to crawl")
    parser.add_argument("--max-images", type=int, default=DEFAULT_MAX_IMAGES,
                        help="Maximum number of image URLs to collect")
    parser.add_argument("--top", type=int, default=None,
                        help="Only print the N highest resolution photos")
    parser.add_argument("--page-timeout", type=float, default=DEFAULT_PAGE_TIMEOUT,
                        help="Seconds to wait for each page")
    parser.add_argument("--image-timeout", type=float, default=DEFAULT_IMAGE_TIMEOUT,
                        help="Seconds to wait for each image")
    parser.add_argument("--log-dir", default=None,
                        help="Directory for log files (console only when omitted)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


async def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    log_manager = LogManager(log_dir=args.log_dir, log_level=args.log_level)

    try:
        crawl_config = CrawlConfig(max_images=args.max_images, page_timeout=args.page_timeout)
        rank_config = RankConfig(image_timeout=args.image_timeout)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    result = await search_photos(
        args.url,
        top_k=args.top,
        crawl_config=crawl_config,
        rank_config=rank_config
    )
    if result.crawl:
        log_manager.log_crawl_summary(result.crawl, photos_ranked=len(result.photos))

    print(json.dumps([photo.to_dict() for photo in result.photos], indent=2))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\n🛑 Stopped by user")
        sys.exit(130)
