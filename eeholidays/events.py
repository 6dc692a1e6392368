"""Mapping of holiday records to calendar events."""

from __future__ import annotations

from collections.abc import Iterable
import warnings

from eeholidays.domain import CalendarEvent, DayKind, HolidayRecord

DAY_OFF_PREFIX = "🎉 "
SHORTENED_PREFIX = "⏰ "
SHORTENED_NOTE = "⏰ Shortened work day (workday ends earlier)"


def relevant_holidays(
    records: Iterable[HolidayRecord],
    excluded: Iterable[DayKind] = (DayKind.MEMORABLE,),
) -> list[HolidayRecord]:
    """Drop records of excluded kinds, keeping the order of the rest."""
    excluded_kinds = frozenset(excluded)
    kept: list[HolidayRecord] = []
    dropped = 0
    for record in records:
        if record.kind_id in excluded_kinds:
            dropped += 1
            continue
        kept.append(record)
    if dropped:
        warnings.warn(f"Skipped {dropped} records of excluded kinds", UserWarning)
    return kept


def to_calendar_event(record: HolidayRecord) -> CalendarEvent:
    is_day_off = record.is_day_off
    is_shortened = record.is_shortened

    description = record.kind
    if record.notes:
        description += f"\n{record.notes}"
    if is_shortened:
        description += f"\n{SHORTENED_NOTE}"

    prefix = DAY_OFF_PREFIX if is_day_off else SHORTENED_PREFIX
    return CalendarEvent(
        start=record.date,
        title=f"{prefix}{record.title}",
        description=description,
        kind_id=record.kind_id,
        status="CONFIRMED",
        busy_status="FREE" if is_day_off else "BUSY",
        transparency="TRANSPARENT" if is_day_off else "OPAQUE",
    )


def build_events(records: Iterable[HolidayRecord]) -> list[CalendarEvent]:
    return [to_calendar_event(record) for record in records]
