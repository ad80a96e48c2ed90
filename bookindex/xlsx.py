"""Utilities for exporting book indexes to Excel workbooks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from bookindex.index import BookIndex

Rows = List[Dict[str, Any]]
Sheets = Dict[str, Rows]

# Text longer than this is wrapped and its column widened.
LONG_TEXT = 50


def _tabulate(index: BookIndex) -> Sheets:
    """Turn an index into one row per book and one row per chapter."""

    book_row = {
        "title": index.title,
        "description": index.description,
        "remote_base": index.remote_base,
        "chapters": len(index.chapters),
    }

    chapter_rows: Rows = [
        {
            "number": ch.number,
            "title": ch.title,
            "anchor": ch.anchor,
            "file_name": ch.file_name,
            "summary": ch.summary,
            "link": ch.link,
            "remote": ch.remote,
        }
        for ch in index.chapters
    ]

    sheets: Sheets = {"Book": [book_row]}
    if chapter_rows:
        sheets["Chapter"] = chapter_rows
    return sheets


def write_workbook(index: BookIndex, path: Path) -> None:
    """Write a book index into an Excel workbook.

    Args:
        index: Index to export.
        path: Destination file path for the workbook.
    """

    workbook = Workbook()

    # Remove the default sheet created by openpyxl when present.
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    for sheet_name, rows in _tabulate(index).items():
        ws = workbook.create_sheet(title=sheet_name)
        headers = list(rows[0].keys())
        ws.append(headers)

        # Columns holding long text get wrapped cells and a wide column.
        long_columns: set[int] = set()
        for row in rows:
            values = [row.get(header) for header in headers]
            for idx, value in enumerate(values):
                if isinstance(value, str) and len(value) > LONG_TEXT:
                    long_columns.add(idx)
            ws.append(values)

        for idx in range(len(headers)):
            col_letter = get_column_letter(idx + 1)
            if idx in long_columns:
                ws.column_dimensions[col_letter].width = 100
                for (cell,) in ws.iter_rows(
                    min_col=idx + 1, max_col=idx + 1, min_row=2
                ):
                    cell.alignment = Alignment(wrapText=True)
            else:
                ws.column_dimensions[col_letter].width = 12

        # Each sheet holds a table named after it.
        end_column = get_column_letter(len(headers))
        table = Table(
            displayName=sheet_name, ref=f"A1:{end_column}{len(rows) + 1}"
        )
        table.tableStyleInfo = TableStyleInfo(
            name="TableStyleMedium9", showRowStripes=True
        )
        ws.add_table(table)

    workbook.save(path)
