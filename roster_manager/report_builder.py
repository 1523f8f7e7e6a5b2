from __future__ import annotations

"""Utilities for assembling pandas DataFrames and writing Excel exports."""

import logging
import unicodedata
from typing import Iterable, Tuple

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE  # type: ignore[import-not-found]

from .person import Person
from .schema import (
    COLUMN_COMMENT,
    COLUMN_EMAIL,
    COLUMN_GROUP,
    COLUMN_GROUP_SIZE,
    COLUMN_INDEX,
    COLUMN_MAJOR,
    COLUMN_NAME,
    COLUMN_STUDENT_ID,
    COLUMN_YEAR,
    EXPORT_COLUMNS,
    EXPORT_SHEET_NAME,
    GROUP_SHEET_NAME,
)

LOGGER = logging.getLogger(__name__)

NO_GROUP_LABEL = "(no group)"


def _cell_text(value: str) -> str:
    """Drop control characters that worksheets cannot store."""

    return ILLEGAL_CHARACTERS_RE.sub("", value)


def build_roster_tables(persons: Iterable[Person]) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Return the roster sheet and the per-group head count sheet."""

    rows = [
        {
            COLUMN_INDEX: position,
            COLUMN_NAME: person.name,
            COLUMN_STUDENT_ID: person.student_id,
            COLUMN_EMAIL: person.email,
            COLUMN_MAJOR: person.major,
            COLUMN_YEAR: person.year,
            COLUMN_GROUP: person.group,
            COLUMN_COMMENT: _cell_text(person.comment),
        }
        for position, person in enumerate(persons, start=1)
    ]
    roster_df = pd.DataFrame(rows, columns=list(EXPORT_COLUMNS))

    if roster_df.empty:
        groups_df = pd.DataFrame(columns=[COLUMN_GROUP, COLUMN_GROUP_SIZE])
    else:
        labelled = roster_df[COLUMN_GROUP].replace("", NO_GROUP_LABEL)
        groups_df = (
            labelled.value_counts(sort=False)
            .rename_axis(COLUMN_GROUP)
            .reset_index(name=COLUMN_GROUP_SIZE)
            .sort_values(by=COLUMN_GROUP, kind="mergesort")
            .reset_index(drop=True)
        )
    return roster_df, groups_df


def _display_length(value: object) -> int:
    """Width of *value* in characters, counting East Asian wide chars as 2."""

    if value is None:
        return 0
    best = 0
    for line in str(value).splitlines():
        length = 0
        for ch in line:
            length += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
        best = max(best, length)
    return best


def _autofit(ws) -> None:
    """Size every column of *ws* to its widest cell (first 1000 rows)."""

    from openpyxl.utils import get_column_letter  # type: ignore[import-not-found]

    max_rows = min(ws.max_row or 0, 1000)
    for col_idx in range(1, (ws.max_column or 0) + 1):
        max_len = 0
        for row_idx in range(1, max_rows + 1):
            max_len = max(max_len, _display_length(ws.cell(row=row_idx, column=col_idx).value))
        width = min(80.0, max(8.0, max_len * 1.2 + 2.0))
        ws.column_dimensions[get_column_letter(col_idx)].width = width


def write_roster_workbook(output_path: str, roster_df: pd.DataFrame, groups_df: pd.DataFrame) -> None:
    """Write the roster and group sheets to an Excel workbook."""

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        roster_df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)
        groups_df.to_excel(writer, index=False, sheet_name=GROUP_SHEET_NAME)
        for ws in writer.sheets.values():
            _autofit(ws)
    LOGGER.debug("Wrote workbook %s (%d rows)", output_path, len(roster_df))
