"""Estonian calendar helpers."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta

from eeholidays.domain import DayKind, HolidayRecord

DAY_OFF_NOTES = "Puhkepäev"

FIXED_HOLIDAYS: tuple[tuple[int, int, str], ...] = (
    (1, 1, "Uusaasta"),
    (5, 1, "Kevadpüha"),
    (6, 23, "Võidupüha"),
    (6, 24, "Jaanipäev"),
    (8, 20, "Taasiseseisvumispäev"),
    (12, 24, "Jõululaupäev"),
    (12, 25, "Esimene jõulupüha"),
    (12, 26, "Teine jõulupüha"),
)

INDEPENDENCE_DAY: tuple[int, int, str] = (
    2,
    24,
    "Iseseisvuspäev, Eesti Vabariigi aastapäev",
)

# (offset from Easter Sunday in days, title)
EASTER_HOLIDAYS: tuple[tuple[int, str], ...] = (
    (-2, "Suur reede"),
    (0, "Ülestõusmispühade 1. püha"),
    (49, "Nelipühade 1. püha"),
)

SHORTENED_WORKDAYS: tuple[tuple[int, int, str], ...] = (
    (2, 23, "Iseseisvuspäevale eelnev tööpäev"),
    (6, 22, "Võidupühale eelnev tööpäev"),
    (12, 23, "Jõululaupäevale eelnev tööpäev"),
    (12, 31, "Uusaastale eelnev tööpäev"),
)

YEARS_BACK = 1
YEARS_AHEAD = 5


def easter_sunday(year: int) -> date:
    """Return Easter Sunday for the given year (Gregorian calendar)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def estonian_holidays(year: int) -> list[HolidayRecord]:
    """Return the holidays and shortened work days of one year.

    Records come in rule order (fixed holidays, Independence Day,
    Easter-relative holidays, shortened work days), not by date.
    """
    records: list[HolidayRecord] = [
        HolidayRecord(
            date=date(year, month, day),
            title=title,
            kind_id=DayKind.NATIONAL_HOLIDAY,
            notes=DAY_OFF_NOTES,
        )
        for month, day, title in FIXED_HOLIDAYS
    ]

    month, day, title = INDEPENDENCE_DAY
    records.append(
        HolidayRecord(
            date=date(year, month, day),
            title=title,
            kind_id=DayKind.NATIONAL_CELEBRATION,
            notes=DAY_OFF_NOTES,
        )
    )

    easter = easter_sunday(year)
    for offset, title in EASTER_HOLIDAYS:
        records.append(
            HolidayRecord(
                date=easter + timedelta(days=offset),
                title=title,
                kind_id=DayKind.NATIONAL_HOLIDAY,
                notes=DAY_OFF_NOTES,
            )
        )

    for month, day, title in SHORTENED_WORKDAYS:
        records.append(
            HolidayRecord(
                date=date(year, month, day),
                title=title,
                kind_id=DayKind.SHORTENED_WORKDAY,
            )
        )
    return records


def is_day_off(day: date) -> bool:
    return any(
        record.date == day and record.is_day_off
        for record in estonian_holidays(day.year)
    )


def is_shortened_workday(day: date) -> bool:
    return any(
        record.date == day and record.is_shortened
        for record in estonian_holidays(day.year)
    )


def current_year(today: Callable[[], date] = date.today) -> int:
    return today().year


def year_window(
    current: int,
    years_back: int = YEARS_BACK,
    years_ahead: int = YEARS_AHEAD,
) -> range:
    """Inclusive window of years around ``current``."""
    return range(current - years_back, current + years_ahead + 1)


def holiday_range(
    current: int,
    years_back: int = YEARS_BACK,
    years_ahead: int = YEARS_AHEAD,
) -> list[HolidayRecord]:
    records: list[HolidayRecord] = []
    for year in year_window(current, years_back, years_ahead):
        records.extend(estonian_holidays(year))
    # sorted() is stable, equal dates keep rule order
    return sorted(records, key=lambda record: record.date)
