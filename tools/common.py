from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, timedelta
from typing import Iterable, Optional, Tuple

from wareki.core.config import load_config


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--date", help="YYYY-MM-DD (JST)")
    parser.add_argument("--start", help="YYYY-MM-DD (JST)")
    parser.add_argument("--end", help="YYYY-MM-DD (JST)")
    parser.add_argument("--north-court", action="store_true", help="南北朝期の元号を北朝で出す")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", action="store_true")


def setup_logging(args: argparse.Namespace) -> None:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def resolve_north_court(args: argparse.Namespace) -> bool:
    return bool(args.north_court) or load_config().wareki.north_court


def parse_date(s: str) -> date:
    return date.fromisoformat(s)


def iter_dates(start: date, end: date) -> Iterable[date]:
    cur = start
    while cur <= end:
        yield cur
        cur = cur + timedelta(days=1)


def resolve_date_range(args: argparse.Namespace) -> Tuple[Optional[date], Optional[date]]:
    if args.start and args.end:
        return parse_date(args.start), parse_date(args.end)
    if args.date:
        d = parse_date(args.date)
        return d, d
    return None, None


def dump_json(obj: object) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))
