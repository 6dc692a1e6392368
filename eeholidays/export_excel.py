"""Excel export helpers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd
from openpyxl.utils import get_column_letter

from eeholidays.domain import HolidayRecord
from eeholidays.errors import FeedPersistenceError
from eeholidays.report import holiday_rows, yearly_counts


def _auto_fit_columns(worksheet) -> None:
    for column_cells in worksheet.columns:
        values = [str(cell.value) if cell.value is not None else "" for cell in column_cells]
        max_length = max((len(value) for value in values), default=0)
        column_letter = get_column_letter(column_cells[0].column)
        worksheet.column_dimensions[column_letter].width = min(max_length + 2, 60)


def _apply_sheet_formatting(worksheet) -> None:
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = worksheet.dimensions
    _auto_fit_columns(worksheet)


def export_holidays_excel(path: str | Path, records: Sequence[HolidayRecord]) -> Path:
    output_path = Path(path)
    holidays_df = pd.DataFrame(
        holiday_rows(records),
        columns=["date", "weekday", "title", "kind", "kind_id", "notes"],
    )
    summary_df = pd.DataFrame(
        yearly_counts(records),
        columns=["year", "total", "day_offs", "shortened"],
    )

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            holidays_df.to_excel(writer, sheet_name="holidays", index=False)
            summary_df.to_excel(writer, sheet_name="summary", index=False)

            for sheet_name in ("holidays", "summary"):
                worksheet = writer.sheets[sheet_name]
                _apply_sheet_formatting(worksheet)
    except OSError as exc:
        raise FeedPersistenceError(output_path, exc.strerror or str(exc)) from exc
    return output_path
