from __future__ import annotations

"""
Year table consistency check.

For every lunisolar year, the decoded month lengths must add up to the
distance between that year's New Year and the next one. 1872 is compared
against 1873-01-01 with its final month cut at day 2.

Uses:
- wareki.core.tables (YEARS / year_start / GREGORIAN_START)
- wareki.core.months (month_lengths / last_day_of_month)
"""

import argparse
import sys

from wareki.core.months import days_before_month, last_day_of_month, month_lengths
from wareki.core.tables import GREGORIAN_START, LAST_YEAR, YEARS, year_record, year_start
from wareki.core.timeutil import DAY

from tools.common import dump_json


def check_year(y: int) -> dict:
    rec = year_record(y)
    lengths = month_lengths(y)
    if y == LAST_YEAR:
        expected = days_before_month(rec, rec.months - 1) + last_day_of_month(rec, rec.months - 1)
        actual = (GREGORIAN_START - year_start(y)) // DAY
    else:
        expected = sum(lengths)
        actual = (year_start(y + 1) - year_start(y)) // DAY
    count_ok = rec.months == 12 + (1 if rec.has_leap else 0)
    return {
        "year": y,
        "months": rec.months,
        "leap": rec.leap,
        "days_decoded": expected,
        "days_between_new_years": actual,
        "ok": bool(count_ok and expected == actual),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Lunisolar year table check")
    parser.add_argument("--year", type=int, help="check a single year")
    parser.add_argument("--json", action="store_true")
    args = parser.parse_args()

    years = [args.year] if args.year else [r.year for r in YEARS]
    rows = [check_year(y) for y in years]
    bad = [r for r in rows if not r["ok"]]

    if args.json:
        dump_json({"checked": len(rows), "bad": bad})
    else:
        for r in bad:
            print(f"NG {r['year']}: decoded={r['days_decoded']} actual={r['days_between_new_years']}")
        print(f"checked={len(rows)} bad={len(bad)}")

    sys.exit(1 if bad else 0)


if __name__ == "__main__":
    main()
