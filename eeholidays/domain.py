"""Domain models for holiday records and calendar events."""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class DayKind(int, Enum):
    NATIONAL_HOLIDAY = 1
    NATIONAL_CELEBRATION = 2
    MEMORABLE = 3
    SHORTENED_WORKDAY = 4

    @property
    def label(self) -> str:
        return KIND_LABELS[self]


KIND_LABELS: dict[DayKind, str] = {
    DayKind.NATIONAL_HOLIDAY: "Riigipüha",
    DayKind.NATIONAL_CELEBRATION: "Rahvuspüha",
    DayKind.MEMORABLE: "Riiklik tähtpäev",
    DayKind.SHORTENED_WORKDAY: "Lühendatud tööpäev",
}

DAY_OFF_KINDS = frozenset({DayKind.NATIONAL_HOLIDAY, DayKind.NATIONAL_CELEBRATION})


def normalize_kind(value: Any) -> DayKind:
    if isinstance(value, DayKind):
        return value
    if value is None:
        raise ValueError("Day kind is required")
    if isinstance(value, bool):
        raise ValueError(f"Invalid day kind: {value!r}")
    if isinstance(value, int):
        try:
            return DayKind(value)
        except ValueError as exc:
            raise ValueError(f"Invalid day kind: {value!r}") from exc
    text = str(value).strip()
    if text.isdigit():
        return normalize_kind(int(text))
    folded = text.casefold()
    for kind, label in KIND_LABELS.items():
        if folded in {label.casefold(), kind.name.casefold()}:
            return kind
    raise ValueError(f"Invalid day kind: {value!r}")


class HolidayRecord(BaseModel):
    date: date
    title: str
    kind: str = ""
    kind_id: DayKind
    notes: str | None = None

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("kind_id", mode="before")
    @classmethod
    def _normalize_kind_id(cls, value: Any) -> DayKind:
        return normalize_kind(value)

    @field_validator("notes", mode="before")
    @classmethod
    def _blank_notes(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @model_validator(mode="before")
    @classmethod
    def _default_kind_label(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        if not values.get("kind") and values.get("kind_id") is not None:
            values = dict(values)
            values["kind"] = normalize_kind(values["kind_id"]).label
        return values

    @property
    def is_day_off(self) -> bool:
        return self.kind_id in DAY_OFF_KINDS

    @property
    def is_shortened(self) -> bool:
        return self.kind_id == DayKind.SHORTENED_WORKDAY


class CalendarEvent(BaseModel):
    start: date
    title: str
    description: str
    kind_id: DayKind
    status: Literal["CONFIRMED"] = "CONFIRMED"
    busy_status: Literal["FREE", "BUSY"]
    transparency: Literal["TRANSPARENT", "OPAQUE"]
    duration: timedelta = Field(default=timedelta(days=1))

    model_config = {"frozen": True}

    @field_validator("duration")
    @classmethod
    def _one_day(cls, value: timedelta) -> timedelta:
        if value != timedelta(days=1):
            raise ValueError("All-day events last exactly one day")
        return value

    @property
    def start_parts(self) -> tuple[int, int, int]:
        return (self.start.year, self.start.month, self.start.day)


class Settings(BaseModel):
    output_dir: str = "docs"
    output_file: str = "estonian-holidays.ics"
    calendar_name: str = "Estonian Holidays"
    calendar_description: str = "Estonian public holidays and shortened work days"
    timezone: str = "Europe/Tallinn"
    prodid: str = "-//eeholidays//Estonian Holidays//ET"
    years_back: int = Field(default=1, ge=0)
    years_ahead: int = Field(default=5, ge=0)

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / self.output_file
