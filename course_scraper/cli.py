"""Command-line interface for Course Scraper."""

import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv

from course_scraper.adapters import available_platforms
from course_scraper.config import settings
from course_scraper.core import CourseScraper


def setup_logging():
    """Configure logging based on settings."""
    logging.basicConfig(
        level=getattr(logging, settings.logging.level.upper(), logging.INFO),
        format=settings.logging.format
    )


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Course Scraper - Extract course metadata from e-learning platforms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  course-scraper coursera https://www.coursera.org/learn/machine-learning
  course-scraper udemy URL1 URL2 --timeout 120
  course-scraper --list-platforms

Environment Variables:
  BROWSER_HEADLESS          Run browser headless (true/false)
  BROWSER_TIMEOUT           Navigation timeout in milliseconds
  BROWSER_MUTATION_TIMEOUT  Wait for injected content in milliseconds
  SCRAPER_CALL_TIMEOUT      Budget for each scrape in seconds
        """
    )

    parser.add_argument(
        "platform",
        nargs="?",
        help="Platform name (see --list-platforms)"
    )

    parser.add_argument(
        "urls",
        nargs="*",
        metavar="URL",
        help="Course page URLs"
    )

    parser.add_argument(
        "--list-platforms",
        action="store_true",
        help="List supported platforms and exit"
    )

    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Budget for each scrape in seconds"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)
    if not args.list_platforms and (not args.platform or not args.urls):
        parser.error("a platform and at least one URL are required")
    return args


async def async_main(argv=None):
    """Async entry point."""
    load_dotenv()
    args = parse_args(argv)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging()

    if args.list_platforms:
        for name in available_platforms():
            print(name)
        return 0

    if args.headed:
        settings.browser.headless = False

    scraper = CourseScraper()
    results, summary = await scraper.scrape_many(args.platform, args.urls, timeout=args.timeout)

    output = [result.to_dict() for result in results]
    print(json.dumps(output[0] if len(output) == 1 else output, indent=2, ensure_ascii=False))

    if len(results) > 1:
        print(summary.format_summary(), file=sys.stderr)

    return 0 if summary.failure_count == 0 else 1


def main():
    """CLI entry point."""
    try:
        sys.exit(asyncio.run(async_main()))
    except KeyboardInterrupt:
        print("\nAborted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
