import unittest
from datetime import date

from eeholidays import calendar_ee, report


class SummaryTests(unittest.TestCase):
    def test_summary_counts(self) -> None:
        summary = report.summarize_holidays(calendar_ee.holiday_range(2025))
        self.assertEqual(summary.total, 112)
        self.assertEqual(summary.day_offs, 84)
        self.assertEqual(summary.shortened, 28)
        self.assertEqual((summary.min_year, summary.max_year), (2024, 2030))

    def test_empty_summary(self) -> None:
        summary = report.summarize_holidays([])
        self.assertEqual(summary.total, 0)
        self.assertIsNone(summary.min_year)

    def test_yearly_counts(self) -> None:
        rows = report.yearly_counts(calendar_ee.holiday_range(2025, 0, 1))
        self.assertEqual(
            rows,
            [
                {"year": 2025, "total": 16, "day_offs": 12, "shortened": 4},
                {"year": 2026, "total": 16, "day_offs": 12, "shortened": 4},
            ],
        )

    def test_holiday_rows(self) -> None:
        rows = report.holiday_rows(calendar_ee.estonian_holidays(2025)[:1])
        self.assertEqual(rows[0]["date"], date(2025, 1, 1))
        self.assertEqual(rows[0]["weekday"], "Wed")
        self.assertEqual(rows[0]["kind_id"], 1)
        self.assertEqual(rows[0]["notes"], "Puhkepäev")


if __name__ == "__main__":
    unittest.main()
