"""
ExcelWriter — builds the styled workbooks written by the report commands.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, NamedTuple, Optional

import pandas as pd
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from simpledata.excel import styles
from simpledata.excel.formatters import blank_for, fit_columns, style_header, write_cell, write_kpi


class Column(NamedTuple):
    key: str
    label: str
    kind: str = "text"   # text | count | money | id


class ExcelWriter:

    def __init__(self) -> None:
        self.wb = Workbook()
        self._fresh = True

    def add_sheet(self, title: str) -> Worksheet:
        # openpyxl starts with one empty sheet; use it for the first title
        if self._fresh:
            self._fresh = False
            ws = self.wb.active
            ws.title = title
            return ws
        return self.wb.create_sheet(title=title)

    def write_title(self, ws: Worksheet, title: str, subtitle: str, span: int = 6) -> int:
        """Merged title/subtitle block. Returns the first free row."""
        for row, text, font in ((1, title, styles.TITLE_FONT), (2, subtitle, styles.SUBTITLE_FONT)):
            ws.cell(row=row, column=1, value=text).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=span)
        return 4

    def write_section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1, value=title).font = styles.SECTION_FONT
        return row + 2

    def write_kpi_row(self, ws: Worksheet, row: int, kpis: Iterable[tuple], step: int = 2) -> int:
        """kpis: (value, label, kind) triples laid out every `step` columns."""
        for i, (value, label, kind) in enumerate(kpis):
            write_kpi(ws, row, 1 + i * step, value, label, kind)
        return row + 3

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[Column],
        rows: list[dict] | pd.DataFrame,
        flag: Optional[Callable[[int, dict], Optional[str]]] = None,
    ) -> int:
        """Header row, one line per record, autofilter and frozen header.

        `flag(index, record)` may name a fill from styles.FLAG_FILLS.
        Returns the row after the last record.
        """
        for col, column in enumerate(columns, 1):
            style_header(ws.cell(row=start_row, column=col, value=column.label))

        if isinstance(rows, pd.DataFrame):
            rows = rows.to_dict("records")

        row = start_row
        for i, record in enumerate(rows):
            row += 1
            mark = flag(i, record) if flag else None
            for col, column in enumerate(columns, 1):
                value = record.get(column.key)
                if value is None or (not isinstance(value, str) and pd.isna(value)):
                    value = blank_for(column.kind)
                write_cell(ws, row, col, value, column.kind, mark)

        ws.auto_filter.ref = f"A{start_row}:{ws.cell(row=row, column=len(columns)).coordinate}"
        ws.freeze_panes = ws.cell(row=start_row + 1, column=1)
        fit_columns(ws)
        return row + 1

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
