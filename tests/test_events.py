import unittest
import warnings
from datetime import date

from eeholidays import calendar_ee, events
from eeholidays.domain import DayKind, HolidayRecord


def _record(kind_id: DayKind, notes: str | None = None) -> HolidayRecord:
    return HolidayRecord(date=date(2025, 6, 23), title="Võidupüha", kind_id=kind_id, notes=notes)


class ToCalendarEventTests(unittest.TestCase):
    def test_day_off_kinds(self) -> None:
        for kind_id in (DayKind.NATIONAL_HOLIDAY, DayKind.NATIONAL_CELEBRATION):
            with self.subTest(kind_id=kind_id):
                event = events.to_calendar_event(_record(kind_id, "Puhkepäev"))
                self.assertEqual(event.title, "🎉 Võidupüha")
                self.assertEqual(event.busy_status, "FREE")
                self.assertEqual(event.transparency, "TRANSPARENT")
                self.assertEqual(event.status, "CONFIRMED")
                self.assertEqual(event.description, f"{kind_id.label}\nPuhkepäev")
                self.assertEqual(event.start_parts, (2025, 6, 23))

    def test_shortened_workday(self) -> None:
        event = events.to_calendar_event(_record(DayKind.SHORTENED_WORKDAY))
        self.assertEqual(event.title, "⏰ Võidupüha")
        self.assertEqual(event.busy_status, "BUSY")
        self.assertEqual(event.transparency, "OPAQUE")
        self.assertEqual(
            event.description,
            "Lühendatud tööpäev\n⏰ Shortened work day (workday ends earlier)",
        )
        self.assertTrue(event.description.endswith(events.SHORTENED_NOTE))

    def test_memorable_day_is_busy(self) -> None:
        event = events.to_calendar_event(_record(DayKind.MEMORABLE))
        self.assertEqual(event.title, "⏰ Võidupüha")
        self.assertEqual(event.busy_status, "BUSY")
        self.assertEqual(event.description, "Riiklik tähtpäev")

    def test_mapping_is_deterministic(self) -> None:
        record = _record(DayKind.NATIONAL_HOLIDAY, "Puhkepäev")
        self.assertEqual(events.to_calendar_event(record), events.to_calendar_event(record))


class RelevantHolidaysTests(unittest.TestCase):
    def test_local_rules_lose_nothing(self) -> None:
        records = calendar_ee.holiday_range(2025)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertEqual(events.relevant_holidays(records), records)

    def test_memorable_days_dropped(self) -> None:
        records = [
            _record(DayKind.NATIONAL_HOLIDAY),
            _record(DayKind.MEMORABLE),
            _record(DayKind.SHORTENED_WORKDAY),
        ]
        with self.assertWarns(UserWarning):
            kept = events.relevant_holidays(records)
        self.assertEqual(
            [record.kind_id for record in kept],
            [DayKind.NATIONAL_HOLIDAY, DayKind.SHORTENED_WORKDAY],
        )

    def test_build_events_keeps_order(self) -> None:
        records = calendar_ee.holiday_range(2025)
        built = events.build_events(records)
        self.assertEqual(len(built), 112)
        self.assertEqual([event.start for event in built], [record.date for record in records])
        self.assertEqual(sum(1 for event in built if event.busy_status == "FREE"), 84)
        self.assertEqual(sum(1 for event in built if event.busy_status == "BUSY"), 28)


if __name__ == "__main__":
    unittest.main()
