from __future__ import annotations

"""
Wareki check script.

Uses:
- wareki.core.calendar.JapaneseCalendar
- wareki.features.config (month / kanshi / weekday names)
"""

import argparse

from wareki.core.calendar import JapaneseCalendar
from wareki.core.errors import WarekiError
from wareki.core.fields import WarekiField
from wareki.core.timeutil import jst_midnight
from wareki.features.config import kanshi_name

from tools.common import add_common_args, dump_json, iter_dates, resolve_date_range, resolve_north_court, setup_logging


def _format_label(era_name: str, year_of_era: int, month_name: str, day: int) -> str:
    return f"{era_name}{year_of_era}年{month_name}月{day}日"


def main() -> None:
    parser = argparse.ArgumentParser(description="Wareki (和暦) check")
    add_common_args(parser)
    args = parser.parse_args()
    setup_logging(args)

    start, end = resolve_date_range(args)
    if start is None or end is None:
        parser.error("--date or --start/--end required")

    north_court = resolve_north_court(args)

    rows = []
    for cur in iter_dates(start, end):
        cal = JapaneseCalendar(jst_midnight(cur), north_court=north_court)
        try:
            fs = cal.fields()
        except WarekiError as e:
            parser.exit(1, f"{cur.isoformat()}: {e}\n")

        era_name = cal.get_name(WarekiField.ERA)
        month_name = cal.get_name(WarekiField.MONTH_CODE)
        label = _format_label(era_name, fs.year_of_era, month_name, fs.day_of_month)

        if args.json:
            rows.append(
                {
                    "date": cur.isoformat(),
                    "era": fs.era,
                    "era_name": era_name,
                    "year_of_era": fs.year_of_era,
                    "civil_year": fs.civil_year,
                    "month": fs.month,
                    "month_code": fs.month_code,
                    "day": fs.day_of_month,
                    "leap": fs.is_leap_month,
                    "year_kanshi": kanshi_name(fs.year_stem, fs.year_branch),
                    "day_kanshi": kanshi_name(fs.day_stem, fs.day_branch),
                    "weekday": cal.get_name(WarekiField.WEEKDAY),
                    "label": label,
                }
            )
        elif args.verbose:
            print(
                f"{cur.isoformat()}  {label}  "
                f"year={kanshi_name(fs.year_stem, fs.year_branch)} "
                f"day={kanshi_name(fs.day_stem, fs.day_branch)} "
                f"({cal.get_name(WarekiField.WEEKDAY)})"
            )
        else:
            print(f"{cur.isoformat()}  {label}")

    if args.json:
        dump_json({"rows": rows})


if __name__ == "__main__":
    main()
