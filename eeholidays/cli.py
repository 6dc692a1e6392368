"""CLI for the Estonian holiday calendar feed."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from eeholidays.calendar_ee import current_year, holiday_range
from eeholidays.domain import Settings
from eeholidays.errors import FeedError
from eeholidays.events import build_events, relevant_holidays
from eeholidays.export_excel import export_holidays_excel
from eeholidays.export_ics import encode_calendar, write_calendar
from eeholidays.report import holiday_rows, summarize_holidays, yearly_counts


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate an iCalendar feed of Estonian holidays"
    )
    parser.add_argument("--out-dir", help="Output directory (default: docs)")
    parser.add_argument("--out-file", help="Output file name inside the output directory")
    parser.add_argument(
        "--year",
        type=int,
        help="Reference year of the window (default: current year)",
    )
    parser.add_argument("--years-back", type=int, help="Years before the reference year")
    parser.add_argument("--years-ahead", type=int, help="Years after the reference year")
    parser.add_argument("--xlsx", help="Also write the holiday table to this Excel file")
    parser.add_argument(
        "--print-holidays",
        action="store_true",
        help="Print the holiday table and per-year counts",
    )
    return parser.parse_args(argv)


def _build_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "output_dir": args.out_dir,
        "output_file": args.out_file,
        "years_back": args.years_back,
        "years_ahead": args.years_ahead,
    }
    try:
        return Settings.model_validate(
            {key: value for key, value in overrides.items() if value is not None}
        )
    except ValidationError as exc:
        raise SystemExit(f"ERROR: invalid settings: {exc}") from exc


def _render_table(rows: list[dict[str, object]]) -> str:
    if not rows:
        return "(no rows)"
    return pd.DataFrame(rows).to_string(index=False)


def _check_window(year: int, settings: Settings) -> None:
    first = year - settings.years_back
    last = year + settings.years_ahead
    if first < date.min.year or last > date.max.year:
        raise SystemExit(
            f"ERROR: years {first}-{last} outside {date.min.year}-{date.max.year}"
        )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = _build_settings(args)
    year = args.year if args.year is not None else current_year()
    _check_window(year, settings)

    print("Computing Estonian holidays...")
    records = relevant_holidays(
        holiday_range(year, settings.years_back, settings.years_ahead)
    )
    if args.print_holidays:
        print(_render_table(holiday_rows(records)))
        print(_render_table(yearly_counts(records)))

    events = build_events(records)
    try:
        content = encode_calendar(events, settings)
        if args.xlsx:
            export_holidays_excel(Path(args.xlsx), records)
        output_path = write_calendar(content, settings.output_path)
    except FeedError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc

    summary = summarize_holidays(records)
    print(f"OK: calendar generated: {output_path}")
    print(f"Total events: {len(events)}")
    print(f"   - Public holidays (day offs): {summary.day_offs}")
    print(f"   - Shortened work days: {summary.shortened}")
    print(f"   - Years covered: {summary.min_year}-{summary.max_year}")


if __name__ == "__main__":
    main()
