"""iCalendar export helpers."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, time, timezone
from pathlib import Path

from icalendar import Calendar, Event, vText

from eeholidays.domain import CalendarEvent, Settings
from eeholidays.errors import FeedEncodingError, FeedPersistenceError

CALENDAR_OPENING = b"BEGIN:VCALENDAR\r\n"
UID_DOMAIN = "eeholidays"


def _event_uid(event: CalendarEvent) -> str:
    year, month, day = event.start_parts
    return f"{year:04d}{month:02d}{day:02d}-{event.kind_id.value}@{UID_DOMAIN}"


def _build_vevent(event: CalendarEvent) -> Event:
    vevent = Event()
    vevent.add("uid", _event_uid(event))
    # fixed per event date, no wall clock
    vevent.add("dtstamp", datetime.combine(event.start, time(), tzinfo=timezone.utc))
    vevent.add("dtstart", event.start)
    vevent.add("duration", event.duration)
    vevent.add("summary", event.title)
    vevent.add("description", event.description)
    vevent.add("status", event.status)
    vevent.add("transp", event.transparency)
    vevent.add("x-microsoft-cdo-busystatus", event.busy_status)
    return vevent


def _metadata_lines(settings: Settings) -> bytes:
    properties = (
        ("NAME", settings.calendar_name),
        ("X-WR-CALNAME", settings.calendar_name),
        ("X-WR-CALDESC", settings.calendar_description),
        ("X-WR-TIMEZONE", settings.timezone),
    )
    return b"".join(
        name.encode("utf-8") + b":" + vText(value).to_ical() + b"\r\n"
        for name, value in properties
    )


def encode_calendar(
    events: Iterable[CalendarEvent],
    settings: Settings | None = None,
) -> bytes:
    """Serialize events, in the given order, into an iCalendar document."""
    if settings is None:
        settings = Settings()

    calendar = Calendar()
    calendar.add("prodid", settings.prodid)
    calendar.add("version", "2.0")
    calendar.add("calscale", "GREGORIAN")
    for event in events:
        try:
            calendar.add_component(_build_vevent(event))
        except (TypeError, ValueError) as exc:
            raise FeedEncodingError(f"Cannot encode event {event.title!r}: {exc}") from exc

    try:
        content = calendar.to_ical()
    except (TypeError, ValueError) as exc:
        raise FeedEncodingError(f"Cannot encode calendar: {exc}") from exc
    if not content.startswith(CALENDAR_OPENING):
        raise FeedEncodingError("Encoded calendar does not start with BEGIN:VCALENDAR")
    return content.replace(
        CALENDAR_OPENING, CALENDAR_OPENING + _metadata_lines(settings), 1
    )


def write_calendar(content: bytes, path: str | Path) -> Path:
    output_path = Path(path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(content)
    except OSError as exc:
        raise FeedPersistenceError(output_path, exc.strerror or str(exc)) from exc
    return output_path


def export_calendar(
    events: Iterable[CalendarEvent],
    settings: Settings | None = None,
) -> Path:
    if settings is None:
        settings = Settings()
    content = encode_calendar(events, settings)
    return write_calendar(content, settings.output_path)
