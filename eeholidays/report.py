"""Reporting helpers."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from eeholidays.domain import HolidayRecord


@dataclass(frozen=True)
class FeedSummary:
    total: int
    day_offs: int
    shortened: int
    min_year: int | None
    max_year: int | None


def summarize_holidays(records: Iterable[HolidayRecord]) -> FeedSummary:
    items = list(records)
    years = [record.date.year for record in items]
    return FeedSummary(
        total=len(items),
        day_offs=sum(1 for record in items if record.is_day_off),
        shortened=sum(1 for record in items if record.is_shortened),
        min_year=min(years) if years else None,
        max_year=max(years) if years else None,
    )


def yearly_counts(records: Iterable[HolidayRecord]) -> list[dict[str, object]]:
    by_year: dict[int, list[HolidayRecord]] = defaultdict(list)
    for record in records:
        by_year[record.date.year].append(record)

    rows: list[dict[str, object]] = []
    for year in sorted(by_year):
        summary = summarize_holidays(by_year[year])
        rows.append(
            {
                "year": year,
                "total": summary.total,
                "day_offs": summary.day_offs,
                "shortened": summary.shortened,
            }
        )
    return rows


def holiday_rows(records: Iterable[HolidayRecord]) -> list[dict[str, object]]:
    return [
        {
            "date": record.date,
            "weekday": record.date.strftime("%a"),
            "title": record.title,
            "kind": record.kind,
            "kind_id": record.kind_id.value,
            "notes": record.notes or "",
        }
        for record in records
    ]
