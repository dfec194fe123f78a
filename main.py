"""
Command-line entry point for SEO Analyzer
"""
import argparse
import asyncio
import json
import sys

import uvicorn

from config import config
from fetcher import FetchError
from monitoring import setup_logging
from seo_analyzer import analyze_url
from urls import InvalidURLError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Analyze a single web page for SEO signals")
    parser.add_argument("url", nargs="?", help="Page URL to analyze")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API instead of a one-off analysis")
    parser.add_argument("--host", default=config.api_host, help="API bind host")
    parser.add_argument("--port", type=int, default=config.api_port, help="API bind port")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")
    args = parser.parse_args(argv)

    if not args.serve and not args.url:
        parser.error("a URL is required unless --serve is given")
    return args


def main(argv=None) -> int:
    """Main function to run the SEO Analyzer"""
    args = parse_args(argv)
    setup_logging(args.log_level, config.log_dir or None)

    if args.serve:
        uvicorn.run("api:app", host=args.host, port=args.port, log_level=args.log_level.lower())
        return 0

    try:
        report = asyncio.run(analyze_url(args.url))
    except InvalidURLError:
        print(f"Error: invalid URL {args.url!r}", file=sys.stderr)
        return 2
    except FetchError as e:
        print(f"Error: failed to analyze URL: {e}", file=sys.stderr)
        return 1

    print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
