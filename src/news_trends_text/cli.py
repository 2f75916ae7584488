"""
Command line entry point.

Usage:
    news-trends bulletin.txt --format json
    news-trends bulletin.txt --format html --output report.html
    news-trends --share-url "https://example.com/?data=..." --format text
    cat bulletin.txt | news-trends - --format share-url
    news-trends --list-markers
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from news_trends_text.api import ReportParser
from news_trends_text.config import get_app_config
from news_trends_text.services import (
    ShareLinkError,
    ShareLinkService,
    export_items_csv,
    render_html,
    render_text,
)
from news_trends_text.types import list_marker_tables
from news_trends_text.validators import CAPTION_PAIRING_POLICIES, ReportInputError

logger = logging.getLogger(__name__)

FORMATS = ('json', 'text', 'html', 'csv', 'share-url')
PARSE_FAILURE_MESSAGE = "Could not parse the report text. Check the input and try again."


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='news-trends',
        description="Parse a News & Trends bulletin into periods, sections and news items."
    )
    parser.add_argument("input", nargs='?', help="Bulletin text file, or '-' for stdin")
    parser.add_argument("--share-url", help="Read the bulletin from a share URL instead of a file")
    parser.add_argument("--format", choices=FORMATS, default='json', help="Output format")
    parser.add_argument("--output", type=Path, help="Write output to this file (required for csv)")
    parser.add_argument(
        "--pairing",
        choices=CAPTION_PAIRING_POLICIES,
        help="Caption pairing policy (default: CAPTION_PAIRING setting)"
    )
    parser.add_argument("--list-markers", action="store_true", help="Print the marker tables and exit")
    return parser


def _read_input(args: argparse.Namespace) -> str:
    if args.share_url:
        return ShareLinkService().decode_url(args.share_url)
    if args.input in (None, '-'):
        return sys.stdin.read()
    return Path(args.input).read_text(encoding='utf-8')


def _write_output(text: str, output: Optional[Path]) -> None:
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding='utf-8')
    logger.info(f"✓ Wrote {output}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=get_app_config().log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if args.list_markers:
        print(json.dumps(list_marker_tables(), ensure_ascii=False, indent=2))
        return 0

    if args.format == 'csv' and args.output is None:
        print("--output is required for csv format", file=sys.stderr)
        return 2

    try:
        raw_text = _read_input(args)
        report = ReportParser(pairing=args.pairing).parse(raw_text)
    except (ReportInputError, ShareLinkError, UnicodeDecodeError, OSError) as e:
        logger.error(f"Error parsing report: {e}")
        print(PARSE_FAILURE_MESSAGE, file=sys.stderr)
        return 1

    if args.format == 'json':
        _write_output(json.dumps(report.to_dict(), ensure_ascii=False, indent=2), args.output)
    elif args.format == 'text':
        _write_output(render_text(report), args.output)
    elif args.format == 'html':
        _write_output(render_html(report), args.output)
    elif args.format == 'csv':
        export_items_csv(report, args.output)
    elif args.format == 'share-url':
        _write_output(ShareLinkService().build_url(raw_text), args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
